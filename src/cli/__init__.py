"""Command-line interface for passage sync.

This package provides the `passage-sync` CLI tool that loads Markdown
passages from a notes folder, uploads them to the document store and
answers read queries over the loaded passages.
"""

from .load_command import LoadCommand
from .query_command import QueryCommand
from .models import ConfigOverrides, ExitCode
from .errors import CLIError, InvalidOptionError

__all__ = [
    'LoadCommand',
    'QueryCommand',
    'ConfigOverrides',
    'ExitCode',
    'CLIError',
    'InvalidOptionError',
]
