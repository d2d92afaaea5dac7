"""Output formatters, one per case style."""

from .formatter_interface import FormatterInterface
from .camel_case_formatter import CamelCaseFormatter
from .dot_case_formatter import DotCaseFormatter

__all__ = ["FormatterInterface", "CamelCaseFormatter", "DotCaseFormatter"]
