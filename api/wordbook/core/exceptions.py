"""
Custom exceptions for the application.
"""


class WordbookException(Exception):
    """Base exception for all Wordbook application exceptions."""
    pass


class ValidationError(WordbookException):
    """Raised when validation fails."""
    pass


class NotFoundError(WordbookException):
    """Raised when a requested word entry is not found."""
    pass


class ConflictError(WordbookException):
    """Raised when a write violates a database constraint."""
    pass
