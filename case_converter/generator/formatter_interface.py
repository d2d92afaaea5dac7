"""
Abstract formatter interface.
"""

from abc import ABC, abstractmethod
from typing import List


class FormatterInterface(ABC):
    """Abstract interface for case-style formatters."""

    #: Registry key for the style
    name: str = ""

    #: Whether digits are spelled out before formatting
    expand_digits: bool = False

    @abstractmethod
    def format(self, words: List[str]) -> str:
        """
        Join words into a single identifier.

        Args:
            words: Non-empty list of normalized words

        Returns:
            Formatted string
        """
        pass
