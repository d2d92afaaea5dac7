"""Word transformations applied before formatting."""

from .digit_expander import DigitExpander
from .mappings import DigitWordMappings

__all__ = ["DigitExpander", "DigitWordMappings"]
