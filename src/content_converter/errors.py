"""Exceptions raised by the content converter."""

from src.document_store.errors import SyncError


class ConversionError(SyncError):
    """Raised when Markdown content cannot be formatted."""

    def __init__(self, message: str):
        super().__init__(message)
