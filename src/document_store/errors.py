"""Typed exception hierarchy for document store errors.

This module defines the root SyncError and all exceptions raised by the
remote document store client. Every exception carries a descriptive message
with enough context to debug a failed sync from the logs alone.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all passage-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class DocumentStoreError(SyncError):
    """Base exception for all remote document store errors."""
    pass


class InvalidCredentialsError(DocumentStoreError):
    """Raised when store credentials are missing or rejected."""

    def __init__(self, endpoint: str, reason: Optional[str] = None):
        message = f"Document store credentials are invalid (endpoint: {endpoint})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.endpoint = endpoint
        self.reason = reason


class DocumentNotFoundError(DocumentStoreError):
    """Raised when a record addressed by id does not exist."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"Document {record_id} not found in collection '{collection}'")
        self.collection = collection
        self.record_id = record_id


class APIUnreachableError(DocumentStoreError):
    """Raised when the document store is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"Document store is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(DocumentStoreError):
    """Raised when store access fails after retries or for an unexpected status."""

    def __init__(self, message: str = "Document store failure (after 3 retries)"):
        super().__init__(message)
