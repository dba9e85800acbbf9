"""In-memory store of the most recently loaded passages.

PassageStore owns the load cycle (walk, replace, sort, notify) and answers
read queries against the snapshot of the last successful load. Listeners
registered with add_listener() are called with the sorted passages after
every successful load; the CLI wires the SyncDispatcher in this way.
"""

import logging
from typing import Callable, List, Optional

from .directory_walker import DirectoryWalker
from .models import Passage

logger = logging.getLogger(__name__)

LoadListener = Callable[[List[Passage]], object]


class PassageStore:
    """Holds the ordered passages of the last load and serves queries.

    Example:
        >>> store = PassageStore(DirectoryWalker("./notes"))
        >>> store.load(ascending=True)
        >>> store.get_page(limit=10, page=1)
    """

    def __init__(self, walker: DirectoryWalker):
        """Initialize an empty store.

        Args:
            walker: DirectoryWalker performing the full scan on every load
        """
        self.walker = walker
        self._passages: List[Passage] = []
        self._listeners: List[LoadListener] = []

    @property
    def passages(self) -> List[Passage]:
        """Copy of the current snapshot."""
        return list(self._passages)

    def add_listener(self, listener: LoadListener) -> None:
        """Register a callback invoked with the passages after each load."""
        self._listeners.append(listener)

    def load(self, ascending: bool = False) -> List[Passage]:
        """Rescan the notes folder and replace the held passages.

        The previous snapshot is only replaced once the walk has succeeded;
        a configuration error leaves it untouched.

        Args:
            ascending: Sort by date ascending (oldest first) instead of descending

        Returns:
            The new, sorted list of passages

        Raises:
            FolderNotFoundError: If the notes folder does not exist
        """
        logger.info(f"Loading passages from {self.walker.root}")

        passages = self.walker.walk()
        # sorted() is stable: equal dates keep traversal order
        passages = sorted(passages, key=lambda p: p.date, reverse=not ascending)
        self._passages = passages

        logger.info(
            f"Loaded {len(passages)} passage(s) "
            f"({'ascending' if ascending else 'descending'} by date)"
        )

        for listener in self._listeners:
            listener(self.passages)

        return self.passages

    def get_by_id(self, permalink: str) -> Optional[Passage]:
        """Find a passage by permalink, or None if it is not loaded."""
        for passage in self._passages:
            if passage.permalink == permalink:
                return passage
        return None

    def get_page(self, limit: int, page: int) -> List[Passage]:
        """Return one page of passages.

        Args:
            limit: Page size
            page: 1-indexed page number

        Returns:
            The contiguous slice for that page; empty when out of range
        """
        if limit < 1 or page < 1:
            return []
        start = (page - 1) * limit
        return self._passages[start:start + limit]

    def count(self) -> int:
        """Number of loaded passages."""
        return len(self._passages)

    def all_ids(self) -> List[str]:
        """Permalinks of all loaded passages, in store order."""
        return [passage.permalink for passage in self._passages]
