"""
Text normalization: separator unification and character stripping.
"""

from ..utils.string_utils import DISALLOWED_PATTERN, WHITESPACE_PATTERN

SEPARATORS = ("-", "_")


def replace_separators(text: str) -> str:
    """Replace every hyphen and underscore with a single space."""
    for separator in SEPARATORS:
        text = text.replace(separator, " ")
    return text


def strip_special_characters(text: str) -> str:
    """
    Keep only ASCII letters, digits and spaces.

    Tabs and line breaks count as word boundaries, so they become spaces
    rather than being dropped.
    """
    text = WHITESPACE_PATTERN.sub(" ", text)
    return DISALLOWED_PATTERN.sub("", text)


def normalize(text: str) -> str:
    """Apply separator replacement then character stripping."""
    return strip_special_characters(replace_separators(text))
