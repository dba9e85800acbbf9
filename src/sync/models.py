"""Data models for the sync dispatcher."""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')


@dataclass
class TaskOutcome(Generic[T]):
    """Result of one task run by the BoundedTaskPool.

    Attributes:
        item: The input the task was called with
        result: Return value of the task (None if it raised)
        error: Exception raised by the task, if any
    """
    item: T
    result: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SyncResult:
    """Summary of one sync batch.

    Attributes:
        created_count: Records inserted into the store
        updated_count: Existing records updated in place
        errors: (permalink, error message) for every failed upsert
        skipped: True when the batch was not run because a sync already ran
    """
    created_count: int = 0
    updated_count: int = 0
    errors: List[Tuple[str, str]] = field(default_factory=list)
    skipped: bool = False

    @property
    def total(self) -> int:
        return self.created_count + self.updated_count
