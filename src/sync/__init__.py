"""Upload of loaded passages to the remote document store."""

from .bounded_pool import BoundedTaskPool
from .models import SyncResult, TaskOutcome
from .sync_dispatcher import SyncDispatcher

__all__ = ['BoundedTaskPool', 'SyncDispatcher', 'SyncResult', 'TaskOutcome']
