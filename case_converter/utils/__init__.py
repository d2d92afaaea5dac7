"""Utility modules for the case converter."""

from .string_utils import has_alnum, capitalize_word
from .file_utils import read_file, read_lines
from .logger import get_logger, configure_logging, set_log_level

__all__ = [
    "has_alnum",
    "capitalize_word",
    "read_file",
    "read_lines",
    "get_logger",
    "configure_logging",
    "set_log_level",
]
