"""
dot.case formatter.
"""

from typing import List
from .formatter_interface import FormatterInterface
from ..utils.logger import get_logger

logger = get_logger(__name__)

SEPARATOR = "."


class DotCaseFormatter(FormatterInterface):
    """Joins words with dots, keeping each word's case as given."""

    name = "dot"
    expand_digits = False

    def format(self, words: List[str]) -> str:
        result = SEPARATOR.join(words)
        logger.debug(f"dot.case: {words} -> {result}")
        return result
