"""YAML front-matter parsing for passage source files.

A passage file optionally starts with a YAML block delimited by ``---``
lines, followed by the Markdown body:

    ---
    title: Hello
    permalink: hello-world
    date: 2021-03-04 10:00:00
    ---
    # Body

Files without the leading delimiter are all body and carry no header.
"""

import re
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import FrontmatterError


class FrontmatterHandler:
    """Splits raw file text into front-matter and body and decodes the YAML."""

    # Header between a leading and a trailing --- line; the header text may be empty
    FRONTMATTER_PATTERN = re.compile(
        r'\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)',
        re.DOTALL
    )

    # Maximum allowed depth for YAML structures
    MAX_YAML_DEPTH = 10

    @classmethod
    def split(cls, content: str) -> Tuple[Optional[str], str]:
        """Split raw text into the header text and the body.

        Args:
            content: Full file content

        Returns:
            Tuple of (header_text, body). header_text is None when the text
            does not start with a front-matter block.
        """
        match = cls.FRONTMATTER_PATTERN.match(content)
        if not match:
            return None, content
        return match.group(1) or '', content[match.end():]

    @classmethod
    def parse(cls, file_path: str, content: str) -> Tuple[Optional[Dict[str, Any]], str]:
        """Decode the front-matter of a file.

        Args:
            file_path: Path to the file (for error messages)
            content: Full Markdown content including front-matter

        Returns:
            Tuple of (metadata, body). metadata is None when there is no
            header or the header is empty.

        Raises:
            FrontmatterError: If the YAML is malformed or not a mapping
        """
        header, body = cls.split(content)
        if header is None:
            return None, body

        try:
            metadata = yaml.safe_load(header)
        except yaml.YAMLError as e:
            raise FrontmatterError(file_path, f"Invalid YAML syntax: {e}") from e
        except ValueError as e:
            # Impossible timestamps such as 2021-02-30 fail while constructing the value
            raise FrontmatterError(file_path, f"Invalid YAML value: {e}") from e

        if metadata is None:
            return None, body

        if not isinstance(metadata, dict):
            raise FrontmatterError(
                file_path,
                f"Front-matter must be a YAML dictionary, got {type(metadata).__name__}"
            )

        cls._validate_yaml_depth(file_path, metadata)
        return metadata, body

    @classmethod
    def join(cls, metadata: Optional[Dict[str, Any]], body: str) -> str:
        """Render metadata and body back into a front-matter document.

        Args:
            metadata: Front-matter fields, or None/empty for a body-only file
            body: Markdown body

        Returns:
            Document text that parse() decodes back to (metadata, body)
        """
        if not metadata:
            return body
        yaml_str = yaml.safe_dump(
            metadata,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )
        return f"---\n{yaml_str}---\n{body}"

    @classmethod
    def _validate_yaml_depth(cls, file_path: str, obj: Any, current_depth: int = 0) -> None:
        """Reject pathologically nested front-matter.

        Raises:
            FrontmatterError: If depth exceeds MAX_YAML_DEPTH
        """
        if current_depth > cls.MAX_YAML_DEPTH:
            raise FrontmatterError(
                file_path,
                f"YAML structure exceeds maximum depth of {cls.MAX_YAML_DEPTH}"
            )

        if isinstance(obj, dict):
            for value in obj.values():
                cls._validate_yaml_depth(file_path, value, current_depth + 1)
        elif isinstance(obj, list):
            for item in obj:
                cls._validate_yaml_depth(file_path, item, current_depth + 1)
