"""Markdown pretty-printer built on mdformat.

Passage bodies are normalized before they are stored so that the content
pushed to the document store is stable across cosmetic edits (heading
style, list markers, blank-line runs, trailing whitespace).
"""

import mdformat

from .errors import ConversionError


class MarkdownFormatter:
    """Formats Markdown text into a canonical CommonMark rendering.

    Example:
        >>> MarkdownFormatter().format("Title\\n=====\\n\\n* item")
        '# Title\\n\\n- item\\n'
    """

    def __init__(self, wrap: str = 'keep', number: bool = False):
        """Initialize the formatter.

        Args:
            wrap: mdformat paragraph wrap mode ('keep', 'no' or a line width)
            number: Number ordered list items consecutively instead of 1. 1. 1.
        """
        self.options = {'wrap': wrap, 'number': number}

    def format(self, markdown: str) -> str:
        """Pretty-print a Markdown document.

        Args:
            markdown: Raw Markdown text

        Returns:
            Formatted Markdown (empty string for blank input)

        Raises:
            ConversionError: If mdformat fails on the input
        """
        if not markdown or not markdown.strip():
            return ''

        try:
            return mdformat.text(markdown, options=self.options)
        except Exception as e:
            raise ConversionError(f"Failed to format markdown: {e}") from e
