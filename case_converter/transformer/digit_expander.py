"""
Expands numeric digits into English words.

Each digit is replaced on its own and the results are concatenated in
place, so "v123" becomes "vonetwothree". The casing pass runs afterwards
and treats the expanded word as a single token.
"""

from typing import List
from .mappings import DigitWordMappings
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DigitExpander:
    """Replaces digit characters with their spelled-out form."""

    def __init__(self):
        self.mappings = DigitWordMappings()

    def expand_digits(self, word: str) -> str:
        """
        Expand every digit in a single word.

        Args:
            word: A word from the splitter

        Returns:
            The word with each digit replaced by its English name
        """
        return "".join(self.mappings.get_digit_word(char) for char in word)

    def expand_words(self, words: List[str]) -> List[str]:
        """Expand digits in every word, keeping order."""
        expanded = [self.expand_digits(word) for word in words]
        logger.debug(f"Expanded digits: {words} -> {expanded}")
        return expanded
