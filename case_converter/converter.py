"""
Main converter class that runs the normalization pipeline for a case style.
"""

import sys
from typing import Any, Dict, List, Optional
from .errors import CaseConversionError
from .normalizer import validate_input, normalize, split_words
from .transformer import DigitExpander
from .generator import FormatterInterface, CamelCaseFormatter, DotCaseFormatter
from .utils.logger import get_logger, configure_logging
from .utils.file_utils import read_lines

logger = get_logger(__name__)


def default_formatters() -> Dict[str, FormatterInterface]:
    """Build the built-in formatter registry."""
    formatters = [CamelCaseFormatter(), DotCaseFormatter()]
    return {formatter.name: formatter for formatter in formatters}


class CaseConverter:
    """Converts free-form text into one of the registered case styles."""

    def __init__(self, formatters: Optional[Dict[str, FormatterInterface]] = None):
        """
        Initialize the converter.

        Args:
            formatters: Formatters keyed by style name. Defaults to camel and dot.
        """
        self.formatters = formatters if formatters is not None else default_formatters()
        self.digit_expander = DigitExpander()

    def available_styles(self) -> List[str]:
        """Return the registered style names, sorted."""
        return sorted(self.formatters)

    def convert(self, text: Any, style: str) -> str:
        """
        Convert text into the given case style.

        Args:
            text: Input string
            style: Registered style name, e.g. "camel" or "dot"

        Returns:
            The converted string

        Raises:
            InvalidInputTypeError: text is not a string
            EmptyInputError: text is empty
            NoContentError: text has no ASCII letter or digit
            ValueError: style is not registered
        """
        formatter = self.formatters.get(style)
        if formatter is None:
            raise ValueError(f"Unknown case style: {style}")

        validate_input(text)
        words = split_words(normalize(text))
        logger.debug(f"Split {text!r} into {words}")

        if formatter.expand_digits:
            words = self.digit_expander.expand_words(words)

        return formatter.format(words)

    def to_camel_case(self, text: Any) -> str:
        """Convert text to camelCase."""
        return self.convert(text, CamelCaseFormatter.name)

    def to_dot_case(self, text: Any) -> str:
        """Convert text to dot.case."""
        return self.convert(text, DotCaseFormatter.name)


_default_converter = CaseConverter()


def camel_case_convert(text: Any) -> str:
    """
    Convert a string to camelCase.

    Hyphens and underscores become word breaks, other symbols are dropped,
    and digits are spelled out. The first word is lowercase and each later
    word is capitalized.

    Examples:
        >>> camel_case_convert("hello-world")
        'helloWorld'
        >>> camel_case_convert("hello-123-world")
        'helloOnetwothreeWorld'
    """
    return _default_converter.to_camel_case(text)


def dot_case_convert(text: Any) -> str:
    """
    Convert a string to dot.case.

    Words keep their original case and digits pass through unchanged.

    Examples:
        >>> dot_case_convert("hello-world")
        'hello.world'
        >>> dot_case_convert("Hello_World")
        'Hello.World'
    """
    return _default_converter.to_dot_case(text)


def main(argv: Optional[List[str]] = None):
    """
    CLI entry point.

    Inputs are converted in order. Conversion stops at the first invalid
    value, so earlier results are already printed when the process exits
    with status 1.
    """
    import argparse

    converter = CaseConverter()

    parser = argparse.ArgumentParser(description="Convert text to camelCase or dot.case")
    parser.add_argument("text", nargs="*", help="Text to convert")
    parser.add_argument(
        "--style",
        choices=converter.available_styles(),
        default=CamelCaseFormatter.name,
        help="Output case style (default: camel)",
    )
    parser.add_argument("--file", help="Convert every non-blank line of this file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    if not args.text and not args.file:
        parser.error("provide text to convert or --file")

    configure_logging(args.log_level)

    inputs = list(args.text)
    if args.file:
        lines = read_lines(args.file)
        if lines is None:
            sys.exit(1)
        inputs.extend(lines)

    try:
        for value in inputs:
            print(converter.convert(value, args.style))
    except CaseConversionError as e:
        logger.error(f"Conversion failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
