"""
Hook settings commands.

Provides commands to generate, inspect and remove the per-process Claude Code
settings file that registers the SessionStart notification hook.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from sessionhook.cli.errors import ExitCode, print_error
from sessionhook.core.config import load_config
from sessionhook.core.hooks import (
    SESSION_START_EVENT,
    FilesystemError,
    HookSettingsGenerator,
    cleanup_hook_settings_file,
)

console = Console(stderr=True)


def generate(
    port: int = typer.Option(
        ...,
        "--port",
        "-p",
        help="Port the session notification server listens on",
    ),
) -> None:
    """
    Generate a hook settings file for this process.

    Prints the absolute path of the generated file on stdout so it can be
    passed straight to claude --settings.

    Examples:
        sessionhook generate --port 8080
        claude --settings "$(sessionhook generate -p 8080)"
    """
    generator = HookSettingsGenerator(load_config())

    try:
        path = generator.generate(port)
    except ValueError as e:
        print_error(str(e), solution="sessionhook generate --port 8080")
        raise typer.Exit(ExitCode.USER_ERROR)
    except FilesystemError as e:
        print_error(
            "Could not write hook settings",
            reason=str(e),
            solution="export SESSIONHOOK_HOME_DIR=<writable directory>",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    for diagnostic in generator.diagnostics:
        if diagnostic.severity == "warning":
            console.print(f"[yellow]⚠[/yellow] {diagnostic.message}")

    typer.echo(str(path))


def cleanup(
    file_path: Path = typer.Argument(
        ...,
        help="Path previously printed by 'sessionhook generate'",
    ),
) -> None:
    """
    Remove a generated hook settings file.

    Missing files and removal errors are ignored; this command always exits 0.

    Examples:
        sessionhook cleanup ~/.sessionhook/tmp/hooks/session-hook-4242.json
    """
    cleanup_hook_settings_file(file_path)


def show(
    file_path: Path = typer.Argument(
        ...,
        help="Generated settings file to inspect",
    ),
) -> None:
    """
    Show the SessionStart hooks registered in a settings file.

    Examples:
        sessionhook show ~/.sessionhook/tmp/hooks/session-hook-4242.json
    """
    if not file_path.exists():
        print_error(f"File not found: {file_path}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            settings = json.load(f)
    except (OSError, ValueError) as e:
        print_error(f"Could not read {file_path}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    hooks = settings.get("hooks", {}) if isinstance(settings, dict) else {}
    entries = hooks.get(SESSION_START_EVENT, []) if isinstance(hooks, dict) else []
    if not isinstance(entries, list):
        entries = []

    table = Table(title=f"{SESSION_START_EVENT} hooks")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Matcher", style="cyan")
    table.add_column("Command")

    for index, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            table.add_row(str(index), "?", str(entry))
            continue
        hook_defs = entry.get("hooks", [])
        if not isinstance(hook_defs, list):
            hook_defs = []
        commands = [str(h.get("command", "")) for h in hook_defs if isinstance(h, dict)]
        table.add_row(str(index), str(entry.get("matcher", "")), "\n".join(commands))

    out = Console()
    out.print(table)
    out.print(f"{len(entries)} {SESSION_START_EVENT} entr{'y' if len(entries) == 1 else 'ies'}")
