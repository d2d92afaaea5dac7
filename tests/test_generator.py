import pytest

from case_converter.generator import CamelCaseFormatter, DotCaseFormatter, FormatterInterface


def test_formatter_interface_is_abstract():
    with pytest.raises(TypeError):
        FormatterInterface()


def test_camel_case_first_word_lowercased():
    assert CamelCaseFormatter().format(["HELLO", "wOrLd"]) == "helloWorld"


def test_camel_case_single_character_words():
    assert CamelCaseFormatter().format(["a", "b", "c"]) == "aBC"


def test_camel_case_single_word():
    assert CamelCaseFormatter().format(["Hello"]) == "hello"


def test_camel_case_empty_list():
    assert CamelCaseFormatter().format([]) == ""


def test_dot_case_preserves_case():
    assert DotCaseFormatter().format(["Hello", "WORLD", "x1"]) == "Hello.WORLD.x1"


def test_formatter_flags():
    assert CamelCaseFormatter.expand_digits is True
    assert DotCaseFormatter.expand_digits is False
    assert CamelCaseFormatter.name == "camel"
    assert DotCaseFormatter.name == "dot"
