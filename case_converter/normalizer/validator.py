"""
Input validation for the conversion pipeline.
"""

from typing import Any
from ..errors import InvalidInputTypeError, EmptyInputError, NoContentError
from ..utils.string_utils import has_alnum
from .normalizer import replace_separators


def ensure_string(value: Any) -> str:
    """
    Check that value is a non-empty string.

    Args:
        value: Candidate input

    Returns:
        The value, unchanged

    Raises:
        InvalidInputTypeError: value is not a str
        EmptyInputError: value is ""
    """
    if not isinstance(value, str):
        raise InvalidInputTypeError()
    if len(value) == 0:
        raise EmptyInputError()
    return value


def ensure_has_content(text: str) -> str:
    """
    Check that separator-normalized text still holds a letter or digit.

    Raises:
        NoContentError: no ASCII letter or digit is present
    """
    if not has_alnum(text):
        raise NoContentError()
    return text


def validate_input(value: Any) -> str:
    """Run every check against a raw input value and return it."""
    ensure_string(value)
    ensure_has_content(replace_separators(value))
    return value
