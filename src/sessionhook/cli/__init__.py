"""
sessionhook CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer

from sessionhook import __version__
from sessionhook.cli import hooks
from sessionhook.core.config.env import load_layered_env

app = typer.Typer(
    name="sessionhook",
    help="Generate Claude Code hook settings for session tracking",
    no_args_is_help=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)


def _configure_logging(debug: bool) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sessionhook {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    sessionhook - Claude Code SessionStart hook settings.

    Writes a per-process settings file that makes Claude Code notify a local
    server whenever a session starts, resumes or compacts, merged on top of
    ~/.claude/settings.json.

    Configuration precedence: SESSIONHOOK_* env vars > ~/.config/sessionhook/config.json
    > defaults. .env files in the working directory and ~/.config/sessionhook/
    are loaded without overriding exported variables.
    """
    load_layered_env()
    _configure_logging(debug)
    ctx.obj = {"debug": debug}


app.command(name="generate")(hooks.generate)
app.command(name="cleanup")(hooks.cleanup)
app.command(name="show")(hooks.show)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
