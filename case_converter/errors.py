"""
Exceptions raised when input cannot be converted.
"""

INVALID_TYPE_MESSAGE = "Input must be a string"
EMPTY_INPUT_MESSAGE = "Input cannot be an empty string"
NO_CONTENT_MESSAGE = "Input must contain at least one letter or number"


class CaseConversionError(Exception):
    """Base class for all conversion failures."""


class InvalidInputTypeError(CaseConversionError, TypeError):
    """Raised when the input is not a string."""

    def __init__(self, message: str = INVALID_TYPE_MESSAGE):
        super().__init__(message)


class EmptyInputError(CaseConversionError, ValueError):
    """Raised when the input is a zero-length string."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class NoContentError(CaseConversionError, ValueError):
    """Raised when the input has no ASCII letter or digit."""

    def __init__(self, message: str = NO_CONTENT_MESSAGE):
        super().__init__(message)
