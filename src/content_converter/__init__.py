"""Markdown formatting for passage bodies."""

from .errors import ConversionError
from .markdown_formatter import MarkdownFormatter

__all__ = ['ConversionError', 'MarkdownFormatter']
