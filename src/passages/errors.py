"""Typed exception hierarchy for passage loading errors.

All exceptions inherit from PassageError so callers can tell local ingest
problems apart from remote store failures. ParseError and its subclasses
are per-file problems: the directory walker logs them and moves on.
ConfigError is fatal to a load.
"""

from typing import Any, Optional

from src.document_store.errors import SyncError


class PassageError(SyncError):
    """Base exception for all passage loading errors."""
    pass


class FilesystemError(PassageError):
    """Raised when filesystem operations fail (read, permissions, encoding)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(PassageError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FolderNotFoundError(ConfigError):
    """Raised when the notes root folder does not exist."""

    def __init__(self, folder_path: str):
        super().__init__(f"{folder_path} is invalid (not an existing directory)", 'notes_dir')
        self.folder_path = folder_path


class ParseError(PassageError):
    """Raised when a single file cannot be turned into a passage."""

    def __init__(self, file_path: str, message: str):
        super().__init__(f"Parse error in {file_path}: {message}")
        self.file_path = file_path
        self.message = message


class FrontmatterError(ParseError):
    """Raised when the YAML front-matter block cannot be decoded."""
    pass


class MissingFrontmatterError(ParseError):
    """Raised when a file has no front-matter block at all."""

    def __init__(self, file_path: str):
        super().__init__(file_path, "missing front-matter (YAML block required at start of file)")


class MissingPermalinkError(ParseError):
    """Raised when the front-matter has no usable permalink."""

    def __init__(self, file_path: str):
        super().__init__(file_path, "front-matter has no 'permalink'")


class InvalidDateError(ParseError):
    """Raised in strict mode when the front-matter date cannot be parsed."""

    def __init__(self, file_path: str, value: Any):
        super().__init__(file_path, f"invalid date {value!r}")
        self.value = value
