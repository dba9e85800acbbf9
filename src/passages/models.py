"""Data models for passage loading.

All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class Passage:
    """Structured record derived from one Markdown source file.

    Attributes:
        filepath: Absolute path of the source file (used for logging only)
        filename: Display slug derived from the path (see PassageBuilder.derive_filename)
        title: Front-matter title, or filename when absent
        content: Pretty-printed Markdown body
        description: Flattened, truncated body followed by the "....." marker
        mtime: Timestamp formatted as YYYY-MM-DD HH:MM:SS
        date: Calendar day, the first 10 characters of mtime
        permalink: Unique identifier shared with the remote record
    """
    filepath: str
    filename: str
    title: str
    content: str
    description: str
    mtime: str
    date: str
    permalink: str

    def to_document(self) -> Dict[str, Any]:
        """Field mapping pushed to the document store.

        The local filepath is left out; it means nothing on the remote side.
        """
        document = asdict(self)
        document.pop('filepath')
        return document


@dataclass
class LoaderConfig:
    """Project settings read from .passage-sync/config.yaml.

    Attributes:
        notes_dir: Root folder scanned for passages
        collection: Remote collection that mirrors the passages
        concurrency: Maximum number of upserts in flight
        ascending: Default sort direction of a load
        strict_dates: Reject files whose date cannot be parsed instead of
                      substituting the current time
    """
    notes_dir: str = './notes'
    collection: str = 'passages'
    concurrency: int = 10
    ascending: bool = False
    strict_dates: bool = False
