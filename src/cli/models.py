"""Data models for CLI operations."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Configuration issues, missing notes folder, bad options
    - SYNC_ERRORS (2): Load succeeded but some passages failed to upload
    - AUTH_ERROR (3): Missing or rejected document store credentials
    - NETWORK_ERROR (4): Document store unreachable or failing
    - NOT_FOUND (5): Requested passage is not loaded
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    SYNC_ERRORS = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
    NOT_FOUND = 5


@dataclass
class ConfigOverrides:
    """Command-line values that take precedence over config.yaml.

    None means "keep the value from the configuration file".
    """
    notes_dir: Optional[str] = None
    collection: Optional[str] = None
    concurrency: Optional[int] = None
    strict_dates: Optional[bool] = None
