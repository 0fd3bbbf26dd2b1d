"""
Document generator exceptions.
"""


class DocumentGenerationError(Exception):
    """Base exception for the document generator."""
    pass


class InvalidAmountError(DocumentGenerationError, ValueError):
    """Raised when a number cannot be spelled out (negative, fractional or too large)."""
    pass


class RequestParsingError(DocumentGenerationError):
    """Raised when a raw payload cannot be turned into a DocumentRequest."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []
