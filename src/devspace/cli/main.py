"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable

import typer
from rich.console import Console

from devspace import __version__
from devspace.cli.commands import shell, show_status
from devspace.config import load_user_config
from devspace.errors import DevspaceError
from devspace.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="devspace",
    help="devspace - reproducible development containers",
    add_completion=False,
)

# Errors go to the diagnostic stream
console = Console(stderr=True)


def _run_cli_command(handler: Callable[..., Any], debug: bool, **kwargs: Any):
    """Helper to run a CLI command with user config and error handling."""
    try:
        user_config = load_user_config()
        setup_logging("DEBUG" if debug else user_config.log_level)
        handler(user_config=user_config, **kwargs)
    except DevspaceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _version_callback(value: bool):
    if value:
        typer.echo(f"devspace {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Manage development environments in containers."""


@app.command("shell")
def shell_command(
    root: Path = typer.Option(Path("."), "--root", help="Project root"),
    stop: bool = typer.Option(False, "--stop", "-s", help="Stop container after shell exits"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug logging"),
):
    """Spawn a shell in the project's dev container."""
    _run_cli_command(shell, debug=debug, root=root, stop=stop)


@app.command("status")
def status_command(
    root: Path = typer.Option(Path("."), "--root", help="Project root"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug logging"),
):
    """Show image and container state for the project."""
    _run_cli_command(show_status, debug=debug, root=root)


def main():
    """Main entry point for CLI."""
    app()
