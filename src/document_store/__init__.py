"""Remote document store client for passage sync.

This package provides a typed REST client for the collection that mirrors
the local passages, plus the exception hierarchy shared by the whole tool.
"""

from .errors import (
    SyncError,
    DocumentStoreError,
    InvalidCredentialsError,
    DocumentNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "DocumentStoreError",
    "InvalidCredentialsError",
    "DocumentNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
