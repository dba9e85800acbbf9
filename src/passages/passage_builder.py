"""Construction of Passage records from Markdown source files.

This module turns the raw text of one file into a Passage: it decodes the
front-matter, normalizes the date, pretty-prints the body and derives the
display fields (filename, title fallback, description).
"""

import logging
import os
import re
from typing import Optional

from src.content_converter.markdown_formatter import MarkdownFormatter

from .date_normalizer import DateNormalizer
from .errors import FilesystemError, MissingFrontmatterError, MissingPermalinkError
from .frontmatter_handler import FrontmatterHandler
from .models import Passage

logger = logging.getLogger(__name__)

# Number of body characters kept in the description
DESCRIPTION_LENGTH = 155

# Appended to every description, truncated or not
DESCRIPTION_MARKER = '.....'

# Numeric ordering prefix of folder names, e.g. "03." in "03.topics"
ORDER_PREFIX_PATTERN = re.compile(r'^\d+\.')


class PassageBuilder:
    """Builds Passage objects from file paths and their contents.

    Example:
        >>> builder = PassageBuilder()
        >>> passage = builder.build_file("/notes/03.topics/readme.md")
        >>> passage.filename
        'topics'
    """

    def __init__(
        self,
        date_normalizer: Optional[DateNormalizer] = None,
        formatter: Optional[MarkdownFormatter] = None,
    ):
        """Initialize the builder.

        Args:
            date_normalizer: Date policy; lenient DateNormalizer by default
            formatter: Markdown pretty-printer applied to every body
        """
        self.date_normalizer = date_normalizer or DateNormalizer()
        self.formatter = formatter or MarkdownFormatter()

    def build_file(self, file_path: str) -> Passage:
        """Read a UTF-8 file and build its passage.

        Raises:
            FilesystemError: If the file cannot be read or decoded
            ParseError: If the file is not a valid passage
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                raw_text = f.read()
        except UnicodeDecodeError as e:
            raise FilesystemError(file_path, 'read', f'Not valid UTF-8: {e}') from e
        except OSError as e:
            raise FilesystemError(file_path, 'read', str(e)) from e

        return self.build(file_path, raw_text)

    def build(self, file_path: str, raw_text: str) -> Passage:
        """Build a passage from a file's raw text.

        Args:
            file_path: Absolute path of the source file
            raw_text: Full file content

        Returns:
            Passage record

        Raises:
            FrontmatterError: If the YAML header is malformed
            MissingFrontmatterError: If there is no YAML header
            MissingPermalinkError: If the header has no permalink
            InvalidDateError: If the date is invalid under strict policy
            ConversionError: If the body cannot be formatted
        """
        metadata, body = FrontmatterHandler.parse(file_path, raw_text)
        if metadata is None:
            raise MissingFrontmatterError(file_path)

        permalink = metadata.get('permalink')
        if permalink is None or not str(permalink).strip():
            raise MissingPermalinkError(file_path)

        mtime = self.date_normalizer.normalize(metadata.get('date'), file_path)
        content = self.formatter.format(body)
        filename = self.derive_filename(file_path)
        title = metadata.get('title')
        logger.debug(f"Built passage {str(permalink).strip()} from {file_path}")

        return Passage(
            filepath=file_path,
            filename=filename,
            title=str(title) if title else filename,
            content=content,
            description=self.describe(content),
            mtime=mtime,
            date=DateNormalizer.calendar_day(mtime),
            permalink=str(permalink).strip(),
        )

    @staticmethod
    def describe(content: str) -> str:
        """Flatten content into a one-line description with the trailing marker."""
        flattened = content.replace('\n', '').strip()
        return flattened[:DESCRIPTION_LENGTH] + DESCRIPTION_MARKER

    @staticmethod
    def derive_filename(file_path: str) -> str:
        """Derive the display slug of a file.

        The slug is the base name without extension. A "readme" file is
        named after its parent folder instead, minus any numeric ordering
        prefix ("03.topics/readme.md" -> "topics").
        """
        stem = os.path.splitext(os.path.basename(file_path))[0]
        if stem.lower() != 'readme':
            return stem

        parent = os.path.basename(os.path.dirname(os.path.abspath(file_path)))
        return ORDER_PREFIX_PATTERN.sub('', parent)
