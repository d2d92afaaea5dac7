"""
String utility functions.
"""

import re

# ASCII-only classes; str.isalnum() would also accept non-ASCII letters and digits
ALNUM_PATTERN = re.compile(r"[A-Za-z0-9]")
DISALLOWED_PATTERN = re.compile(r"[^A-Za-z0-9 ]")
WHITESPACE_PATTERN = re.compile(r"[\t\n\r\f\v]")


def has_alnum(text: str) -> bool:
    """Return True if text contains at least one ASCII letter or digit."""
    return ALNUM_PATTERN.search(text) is not None


def capitalize_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    if not word:
        return ""
    return word[0].upper() + word[1:].lower()
