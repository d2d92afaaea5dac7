"""Convert free-form text to camelCase and dot.case."""

from .converter import CaseConverter, camel_case_convert, dot_case_convert
from .errors import (
    CaseConversionError,
    InvalidInputTypeError,
    EmptyInputError,
    NoContentError,
)

__all__ = [
    "CaseConverter",
    "camel_case_convert",
    "dot_case_convert",
    "CaseConversionError",
    "InvalidInputTypeError",
    "EmptyInputError",
    "NoContentError",
]
