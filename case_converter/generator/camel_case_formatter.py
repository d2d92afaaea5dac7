"""
camelCase formatter.
"""

from typing import List
from .formatter_interface import FormatterInterface
from ..utils.string_utils import capitalize_word
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CamelCaseFormatter(FormatterInterface):
    """Lowercases the first word and capitalizes the rest, with no separator."""

    name = "camel"
    expand_digits = True

    def format(self, words: List[str]) -> str:
        if not words:
            return ""

        head, tail = words[0], words[1:]
        result = head.lower() + "".join(capitalize_word(word) for word in tail)
        logger.debug(f"camelCase: {words} -> {result}")
        return result
