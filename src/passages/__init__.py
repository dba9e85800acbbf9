"""Passage loading library.

This package turns a folder of Markdown files with YAML front-matter into
Passage records and keeps the latest load in memory for queries.
"""

from .config_loader import ConfigLoader
from .date_normalizer import DateNormalizer
from .directory_walker import DirectoryWalker
from .errors import (
    PassageError,
    FilesystemError,
    ConfigError,
    FolderNotFoundError,
    ParseError,
    FrontmatterError,
    MissingFrontmatterError,
    MissingPermalinkError,
    InvalidDateError,
)
from .frontmatter_handler import FrontmatterHandler
from .models import LoaderConfig, Passage
from .passage_builder import PassageBuilder
from .passage_store import PassageStore

__all__ = [
    'ConfigLoader',
    'DateNormalizer',
    'DirectoryWalker',
    'PassageError',
    'FilesystemError',
    'ConfigError',
    'FolderNotFoundError',
    'ParseError',
    'FrontmatterError',
    'MissingFrontmatterError',
    'MissingPermalinkError',
    'InvalidDateError',
    'FrontmatterHandler',
    'LoaderConfig',
    'Passage',
    'PassageBuilder',
    'PassageStore',
]
