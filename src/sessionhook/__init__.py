"""
sessionhook - Claude Code SessionStart hook settings

Generates per-process Claude Code settings files that report session
lifecycle events to a local listener.
"""

__version__ = "0.1.0"

# Re-export core API for convenience
from sessionhook.core.config.models import HookSettingsConfig
from sessionhook.core.hooks.generator import (
    FilesystemError,
    HookSettingsGenerator,
    cleanup_hook_settings_file,
    generate_hook_settings_file,
)

__all__ = [
    "FilesystemError",
    "HookSettingsConfig",
    "HookSettingsGenerator",
    "cleanup_hook_settings_file",
    "generate_hook_settings_file",
    "__version__",
]
