"""
Hook settings generation for Claude Code session tracking.

This module writes a temporary, per-process settings file that registers a
SessionStart hook with Claude Code, merged on top of the user's own
~/.claude/settings.json, and removes the file again on shutdown.

Key Functions:
    generate_hook_settings_file: Write the settings file for a listener port
    cleanup_hook_settings_file: Remove a generated settings file
    merge_session_start_hook: Pure merge of a hook entry into settings

Key Models:
    HookDescriptor: SessionStart entry written into settings.json
    HookDiagnostic: Recovered failure or notable condition
    SettingsLoadResult: Outcome of reading the user settings file

Usage:
    from sessionhook.core.hooks import HookSettingsGenerator
    from sessionhook.core.config import load_config

    generator = HookSettingsGenerator(load_config())
    path = generator.generate(port)
    try:
        ...  # run claude --settings path
    finally:
        generator.cleanup(path)
"""

from sessionhook.core.hooks.generator import (
    FilesystemError,
    HookSettingsError,
    HookSettingsGenerator,
    build_hook_command,
    cleanup_hook_settings_file,
    generate_hook_settings_file,
    merge_session_start_hook,
    settings_file_name,
)
from sessionhook.core.hooks.models import (
    MATCH_ALL,
    SESSION_START_EVENT,
    HookCommand,
    HookDescriptor,
    HookDiagnostic,
    SettingsLoadResult,
)

__all__ = [
    # Generator functions
    "HookSettingsGenerator",
    "build_hook_command",
    "cleanup_hook_settings_file",
    "generate_hook_settings_file",
    "merge_session_start_hook",
    "settings_file_name",
    # Errors
    "FilesystemError",
    "HookSettingsError",
    # Models
    "HookCommand",
    "HookDescriptor",
    "HookDiagnostic",
    "SettingsLoadResult",
    "MATCH_ALL",
    "SESSION_START_EVENT",
]
