"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
status messages, spinners, passage tables and load/sync summaries. It
supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, List

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

from src.passages.models import Passage
from src.sync.models import SyncResult


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Loaded 12 passage(s)")
        >>> with handler.spinner("Loading passages..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a single operation runs.

        Args:
            message: Message to display with spinner
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_passages(self, passages: List[Passage], title: str = "Passages") -> None:
        """Display passages as a table (date, permalink, title)."""
        if not passages:
            self.console.print("[yellow]No passages[/yellow]")
            return

        table = Table(title=title)
        table.add_column("Date", no_wrap=True)
        table.add_column("Permalink")
        table.add_column("Title")
        for passage in passages:
            table.add_row(passage.date, passage.permalink, passage.title)
        self.console.print(table)

    def print_passage(self, passage: Passage) -> None:
        """Display one passage with its metadata and description."""
        self.console.print(f"[bold]{passage.title}[/bold]")
        self.console.print(f"  permalink: {passage.permalink}")
        self.console.print(f"  filename:  {passage.filename}")
        self.console.print(f"  mtime:     {passage.mtime}")
        self.console.print(f"  source:    {passage.filepath}")
        self.console.print(f"\n{passage.description}")
        if self.verbosity >= 1:
            self.console.print(f"\n{passage.content}")

    def print_sync_summary(self, loaded_count: int, result: SyncResult) -> None:
        """Display load and upload summary with color coding.

        Args:
            loaded_count: Number of passages loaded from disk
            result: Outcome of the upload batch
        """
        self.console.print("\n[bold]Sync Summary:[/bold]")
        self.console.print(f"  [blue]↺[/blue] Loaded: {loaded_count} passage(s)")

        if result.skipped:
            self.console.print("\n[yellow]Upload skipped (already uploaded in this process)[/yellow]")
            return

        if result.created_count > 0:
            self.console.print(f"  [green]+[/green] Created: {result.created_count} record(s)")

        if result.updated_count > 0:
            self.console.print(f"  [green]↑[/green] Updated: {result.updated_count} record(s)")

        if result.errors:
            self.console.print(f"  [red]✗[/red] Failed: {len(result.errors)} record(s)")
            for permalink, message in result.errors:
                self.console.print(f"    • {permalink}: {message}")

        if loaded_count == 0:
            self.console.print("\n[yellow]No passages to sync[/yellow]")
        elif result.errors:
            self.console.print("\n[red]Sync completed with errors[/red]")
        else:
            self.console.print("\n[green]Sync completed successfully[/green]")
