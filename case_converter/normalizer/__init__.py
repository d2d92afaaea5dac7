"""Normalization stages shared by every case style."""

from .normalizer import replace_separators, strip_special_characters, normalize
from .splitter import split_words
from .validator import ensure_string, ensure_has_content, validate_input

__all__ = [
    "replace_separators",
    "strip_special_characters",
    "normalize",
    "split_words",
    "ensure_string",
    "ensure_has_content",
    "validate_input",
]
