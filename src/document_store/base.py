"""Structural interface of a remote document store.

The sync dispatcher only needs three operations from the remote side:
equality-filtered lookup, insert and update-by-id. Anything implementing
these methods can be plugged into SyncDispatcher (the REST client, an
in-memory fake in tests, ...).
"""

from typing import Any, Dict, List, Optional, Protocol


class DocumentStore(Protocol):
    """Minimal document store API used for find-or-create upserts."""

    def find_by_field(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Return every record whose ``field`` equals ``value``."""
        ...

    def add(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new record and return it (including its id)."""
        ...

    def update_by_id(self, record_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Update the fields of an existing record in place."""
        ...


def record_id(record: Dict[str, Any]) -> Optional[str]:
    """Extract the identifier of a stored record.

    Stores differ on the key they use, so both ``id`` and ``_id`` are accepted.

    Args:
        record: Record as returned by the store

    Returns:
        The record id as a string, or None if the record carries none
    """
    for key in ('id', '_id'):
        value = record.get(key)
        if value not in (None, ''):
            return str(value)
    return None
