#!/usr/bin/env python3
"""
Main CLI entry point for navtree
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console

from navtree import __version__
from navtree.config import NavtreeConfig, load_config
from navtree.exceptions import ConfigurationError
from navtree.ui.app import NavTreeApp
from navtree.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

console = Console(stderr=True)

app = typer.Typer(add_completion=False)


def version_callback(value: bool) -> None:
    """Show navtree version"""
    if value:
        typer.echo(f"navtree version {__version__}")
        raise typer.Exit()


def resolve_start_directory(path: Optional[Path]) -> Path:
    """Return the absolute start directory, defaulting to the working directory.

    Raises:
        ConfigurationError: ``path`` does not exist or is not a directory
    """
    if path is None:
        return Path.cwd()

    start = path.expanduser().resolve()
    if not start.exists():
        raise ConfigurationError("Start path does not exist", setting="path", path=str(start))
    if not start.is_dir():
        raise ConfigurationError("Start path is not a directory", setting="path", path=str(start))
    return start


def build_session(
    path: Optional[Path],
    *,
    refresh_interval: Optional[float] = None,
    no_refresh: bool = False,
    keep_stale: bool = False,
    max_file_bytes: Optional[int] = None,
) -> Tuple[Path, NavtreeConfig]:
    """Resolve the start directory and merge CLI options over the config file."""
    start = resolve_start_directory(path)
    config = load_config().with_overrides(
        refresh_interval=0.0 if no_refresh else refresh_interval,
        discard_stale_results=False if keep_stale else None,
        max_file_bytes=max_file_bytes,
    )
    return start, config


@app.command()
def browse(
    path: Optional[Path] = typer.Argument(
        None, help="Directory to start in (defaults to the current directory)"
    ),
    refresh_interval: Optional[float] = typer.Option(
        None, "--refresh-interval", help="Seconds between directory re-reads"
    ),
    no_refresh: bool = typer.Option(False, "--no-refresh", help="Disable periodic re-reads"),
    keep_stale: bool = typer.Option(
        False,
        "--keep-stale",
        help="Apply read results in completion order, even when superseded",
    ),
    max_file_bytes: Optional[int] = typer.Option(
        None, "--max-file-bytes", help="Refuse to open files larger than this"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    Browse a directory tree and view text files.

    [bold]Examples:[/bold]

    Browse the current directory:
        [cyan]navtree[/cyan]

    Browse a project without periodic refresh:
        [cyan]navtree ~/src/project --no-refresh[/cyan]
    """
    setup_logging(verbose=verbose)

    try:
        start, config = build_session(
            path,
            refresh_interval=refresh_interval,
            no_refresh=no_refresh,
            keep_stale=keep_stale,
            max_file_bytes=max_file_bytes,
        )
    except ConfigurationError as e:
        logger.error(f"Invalid startup options: {e}")
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e

    logger.info(f"Starting navtree in {start} with {config}")
    try:
        NavTreeApp(start, config).run()
    except KeyboardInterrupt:
        pass


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
