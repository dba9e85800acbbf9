"""Main CLI entry point for the passage-sync command.

This module provides the Typer application exposing the passage pipeline:
`load` scans the notes folder and uploads every passage, while `list`,
`get`, `count` and `ids` answer read queries from a fresh local load.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.passages.config_loader import ConfigLoader

from .load_command import LoadCommand
from .models import ConfigOverrides
from .output import OutputHandler
from .query_command import QueryCommand

app = typer.Typer(
    name="passage-sync",
    help="""Load Markdown passages from a notes folder and sync them to a document store.

QUICK START:
  passage-sync load                       # Load ./notes (newest first) and upload
  passage-sync load --asc --no-sync       # Load oldest first, skip the upload
  passage-sync list --limit 5 --page 2    # Show the second page of five
  passage-sync get hello-world            # Show one passage by permalink""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

CONFIG_OPTION = typer.Option(
    ConfigLoader.DEFAULT_CONFIG_PATH, "--config", help="Path to the YAML configuration file"
)
NOTES_DIR_OPTION = typer.Option(None, "--notes-dir", help="Notes folder to scan (overrides config)")
LOGDIR_OPTION = typer.Option(None, "--logdir", help="Directory for log files (creates timestamped log file)")
VERBOSITY_OPTION = typer.Option(0, "--verbosity", "-v", help="Verbosity level: 0=summary, 1=info, 2=debug")
NO_COLOR_OPTION = typer.Option(False, "--no-color", help="Disable colored output")


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"passage-sync_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt=date_format
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"passage-sync version {VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Load Markdown passages from a notes folder and sync them to a document store."""


@app.command("load")
def load_command(
    asc: Optional[bool] = typer.Option(
        None,
        "--asc/--desc",
        help="Sort by date ascending or descending (default from config: descending)",
    ),
    no_sync: bool = typer.Option(False, "--no-sync", help="Load only, do not upload"),
    collection: Optional[str] = typer.Option(None, "--collection", help="Remote collection name"),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", help="Maximum concurrent uploads"),
    strict_dates: Optional[bool] = typer.Option(
        None,
        "--strict-dates/--lenient-dates",
        help="Skip files with unparseable dates instead of using the current time",
    ),
    notes_dir: Optional[str] = NOTES_DIR_OPTION,
    config: str = CONFIG_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    verbosity: int = VERBOSITY_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Scan the notes folder and upsert every passage by permalink."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    overrides = ConfigOverrides(
        notes_dir=notes_dir,
        collection=collection,
        concurrency=concurrency,
        strict_dates=strict_dates,
    )
    command = LoadCommand(config_path=config, overrides=overrides, output_handler=output)
    exit_code = command.run(ascending=asc, sync=not no_sync)
    raise typer.Exit(exit_code)


@app.command("list")
def list_command(
    limit: int = typer.Option(10, "--limit", "-l", help="Passages per page"),
    page: int = typer.Option(1, "--page", "-p", help="Page number, starting at 1"),
    asc: Optional[bool] = typer.Option(None, "--asc/--desc", help="Sort direction"),
    notes_dir: Optional[str] = NOTES_DIR_OPTION,
    config: str = CONFIG_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    verbosity: int = VERBOSITY_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Show one page of passages."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    command = QueryCommand(config, ConfigOverrides(notes_dir=notes_dir), output)
    raise typer.Exit(command.list_page(limit=limit, page=page, ascending=asc))


@app.command("get")
def get_command(
    permalink: str = typer.Argument(..., help="Permalink of the passage"),
    notes_dir: Optional[str] = NOTES_DIR_OPTION,
    config: str = CONFIG_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    verbosity: int = VERBOSITY_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Show the passage with the given permalink."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    command = QueryCommand(config, ConfigOverrides(notes_dir=notes_dir), output)
    raise typer.Exit(command.get(permalink))


@app.command("count")
def count_command(
    notes_dir: Optional[str] = NOTES_DIR_OPTION,
    config: str = CONFIG_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    verbosity: int = VERBOSITY_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Print the number of passages."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    command = QueryCommand(config, ConfigOverrides(notes_dir=notes_dir), output)
    raise typer.Exit(command.count())


@app.command("ids")
def ids_command(
    asc: Optional[bool] = typer.Option(None, "--asc/--desc", help="Sort direction"),
    notes_dir: Optional[str] = NOTES_DIR_OPTION,
    config: str = CONFIG_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    verbosity: int = VERBOSITY_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Print every permalink, one per line."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    command = QueryCommand(config, ConfigOverrides(notes_dir=notes_dir), output)
    raise typer.Exit(command.ids(ascending=asc))


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
