"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Optional, Callable, Any

import typer
from pydantic import ValidationError
from rich.console import Console

from lxcconf.cli.commands import (
    show_config,
    validate_config,
    list_directives,
)
from lxcconf.directives.registry import get_directive_registry
from lxcconf.errors import ConfigError
from lxcconf.loader.confile import load_config
from lxcconf.loader.settings import load_settings
from lxcconf.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="lxcconf",
    help="Load and inspect lxc container configuration files",
    add_completion=False,
)

# Console for rich output
console = Console()


def _run_cli_command(
    handler: Callable[..., Any],
    file: Path,
    settings: Optional[Path],
    log_level: Optional[str] = None,
    **kwargs: Any,
):
    """Helper to load a configuration file and hand it to a command."""
    try:
        loader_settings = load_settings(settings)
        setup_logging(log_level or loader_settings.log_level)
        conf = load_config(file, settings=loader_settings)
        handler(conf, path=file, **kwargs)
    except (ConfigError, ValidationError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command("show")
def show_command(
    file: Path = typer.Argument(..., help="Container configuration file"),
    settings: Optional[Path] = typer.Option(
        None, "--settings", "-s", help="Loader settings file (YAML)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Override the configured log level"
    ),
):
    """Show the parsed configuration."""
    _run_cli_command(show_config, file=file, settings=settings, log_level=log_level)


@app.command("validate")
def validate_command(
    file: Path = typer.Argument(..., help="Container configuration file"),
    settings: Optional[Path] = typer.Option(
        None, "--settings", "-s", help="Loader settings file (YAML)"
    ),
):
    """Check that a configuration file loads."""
    _run_cli_command(validate_config, file=file, settings=settings)


@app.command("keys")
def keys_command():
    """List supported configuration keys."""
    list_directives(get_directive_registry())


def main():
    """Main entry point for CLI."""
    app()
