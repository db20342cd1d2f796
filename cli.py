#!/usr/bin/env python3
"""
Notes CLI.

Interactive command-line note-taking tool.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                    # Show help

    # Interactive mode
    python cli.py shell                     # Start the notes shell
    python cli.py shell --no-seed           # Start with an empty notebook

    # System info
    python cli.py system info               # Show app info
    python cli.py system config             # Show configuration
    python cli.py system version            # Show version

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from modules.backend.core.config import validate_project_root
from modules.backend.core.logging import setup_logging
from modules.cli.commands import system_app

# Create main app
app = typer.Typer(
    name="cli",
    help="Notes CLI - In-memory note taking from the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register command groups
app.add_typer(system_app, name="system")


@app.command()
def shell(
    no_seed: bool = typer.Option(
        False,
        "--no-seed",
        help="Start without the welcome notes from application.yaml",
    ),
) -> None:
    """
    Start interactive shell mode.

    Notes live in memory and are discarded when the shell exits.
    """
    from modules.backend.core.config import get_app_config
    from modules.backend.core.dependencies import build_note_service
    from modules.cli.shell import NoteShell

    settings = get_app_config().application.shell
    service = build_note_service(seed=not no_seed)
    NoteShell(service, blank_title_is_absent=settings.blank_title_is_absent).run()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Notes CLI.

    Create, list, update, delete and search notes in an interactive shell.
    """
    # Config and log paths resolve from the .project_root found above the cwd
    validate_project_root()

    # Configure logging based on flags, falling back to logging.yaml
    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
