"""Typed exception hierarchy for CLI-related errors."""

from src.document_store.errors import SyncError


class CLIError(SyncError):
    """Base exception for all CLI-related errors."""
    pass


class InvalidOptionError(CLIError):
    """Raised when a command-line option has an unusable value."""

    def __init__(self, option: str, message: str):
        super().__init__(f"Invalid value for {option}: {message}")
        self.option = option
