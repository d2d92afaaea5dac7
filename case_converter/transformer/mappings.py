"""
Digit to English word mappings.
"""

from types import MappingProxyType


class DigitWordMappings:
    """Spelled-out English words for the ASCII digits."""

    DIGIT_WORDS = MappingProxyType({
        "0": "zero",
        "1": "one",
        "2": "two",
        "3": "three",
        "4": "four",
        "5": "five",
        "6": "six",
        "7": "seven",
        "8": "eight",
        "9": "nine",
    })

    def get_digit_word(self, char: str) -> str:
        """Get the English word for a digit, or the character itself."""
        return self.DIGIT_WORDS.get(char, char)
