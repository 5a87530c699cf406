class DocumentError(Exception):
    """Base exception for document preparation errors."""


class UnknownCategoryError(DocumentError):
    """Raised when a declared category is not one of the supported values."""


class FileReadError(DocumentError):
    """Raised when an uploaded file cannot be read from disk."""
