"""Recursive discovery of passage files under a notes folder.

Only entries following the naming convention take part in a load: files
named readme.md (any case) and entries whose name starts with a numeric
ordering prefix such as "01.intro.md" or "03.topics". Everything else is
skipped silently.
"""

import logging
import os
import re
from typing import List, Optional

from src.document_store.errors import SyncError

from .errors import FolderNotFoundError
from .models import Passage
from .passage_builder import PassageBuilder

logger = logging.getLogger(__name__)

VALID_NAME_PATTERN = re.compile(r'^\d+\.')

MARKDOWN_EXTENSION = '.md'

# Maximum folder nesting followed below the root
MAX_RECURSION_DEPTH = 50


class DirectoryWalker:
    """Walks a notes folder and builds a Passage for every qualifying file.

    Per-file failures are logged and the file is left out; they never abort
    the walk. Results come back in directory-listing order; sorting is the
    caller's job.

    Example:
        >>> walker = DirectoryWalker("./notes")
        >>> passages = walker.walk()
    """

    def __init__(self, root: str, builder: Optional[PassageBuilder] = None):
        """Initialize the walker.

        Args:
            root: Notes folder to scan
            builder: PassageBuilder used for every qualifying file
        """
        self.root = os.path.abspath(root)
        self.builder = builder or PassageBuilder()

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check whether a directory entry follows the naming convention."""
        if name.lower() == 'readme.md':
            return True
        return bool(VALID_NAME_PATTERN.match(name))

    def walk(self) -> List[Passage]:
        """Build passages for every qualifying file below the root.

        Returns:
            Successfully built passages, in traversal order

        Raises:
            FolderNotFoundError: If the root folder does not exist
        """
        if not os.path.isdir(self.root):
            raise FolderNotFoundError(self.root)

        passages: List[Passage] = []
        self._walk(self.root, passages, depth=0)
        return passages

    def _walk(self, folder: str, passages: List[Passage], depth: int) -> None:
        if depth > MAX_RECURSION_DEPTH:
            logger.warning(f"Maximum folder depth reached at {folder}, not descending further")
            return

        with os.scandir(folder) as entries:
            for entry in entries:
                if not self.is_valid_name(entry.name):
                    logger.debug(f"Skipping {entry.path} (name does not match convention)")
                    continue

                if entry.is_file() and entry.name.endswith(MARKDOWN_EXTENSION):
                    try:
                        passages.append(self.builder.build_file(entry.path))
                    except SyncError as e:
                        logger.warning(f"Warning: {entry.path} parse failed: {e}")
                elif entry.is_dir():
                    self._walk(entry.path, passages, depth + 1)
