"""
Per-process hook settings file generation for Claude Code.

Builds a temporary settings.json that registers a SessionStart hook pointing
at the forwarder script, so Claude Code notifies a local listener whenever a
session starts, resumes or compacts. The user's own ~/.claude/settings.json is
merged in non-destructively and is never written.

Implementation:
    - Ensures <home_dir>/tmp/hooks exists
    - Reads user settings (absent or broken files degrade to {})
    - Appends the SessionStart hook after any existing SessionStart entries
    - Writes session-hook-<pid>.json and returns its absolute path
    - Removes that file again on cleanup, never raising

Failures that leave no usable file (directory creation, file write) raise
FilesystemError. Everything else is logged at debug level and recorded as a
HookDiagnostic on the generator.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from sessionhook.core.config import HookSettingsConfig, load_config
from sessionhook.core.hooks.models import (
    MATCH_ALL,
    SESSION_START_EVENT,
    HookCommand,
    HookDescriptor,
    HookDiagnostic,
    SettingsLoadResult,
)
from sessionhook.utils.project import get_install_root

logger = logging.getLogger(__name__)

SETTINGS_FILE_PREFIX = "session-hook-"


class HookSettingsError(Exception):
    """Base exception for hook settings generation."""

    pass


class FilesystemError(HookSettingsError):
    """Raised when a directory or settings file required for generation cannot be written."""

    def __init__(self, message: str, path: Path | str, cause: BaseException | None = None):
        self.path = Path(path)
        self.cause = cause
        detail = f"{message}: {self.path}"
        if cause is not None:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


def settings_file_name(pid: int) -> str:
    """Name of the generated settings file for a process."""
    return f"{SETTINGS_FILE_PREFIX}{pid}.json"


def build_hook_command(runtime: str, script_path: Path | str, port: int) -> str:
    """
    Build the shell command Claude Code runs when the hook fires.

    The script path is quoted so installation roots containing spaces survive
    shell parsing.

    Example:
        >>> build_hook_command("python3", "/opt/app/scripts/fwd.py", 8080)
        'python3 "/opt/app/scripts/fwd.py" 8080'
    """
    return f'{runtime} "{script_path}" {port}'


def _reject_constant(name: str) -> Any:
    """Reject NaN and Infinity, which strict JSON parsers refuse."""
    raise ValueError(f"Non-standard JSON constant: {name}")


def _record(
    diagnostics: list[HookDiagnostic] | None,
    diagnostic: HookDiagnostic,
) -> None:
    level = logging.WARNING if diagnostic.severity in ("error", "warning") else logging.DEBUG
    logger.log(level, f"[hook-settings] {diagnostic.message}")
    if diagnostics is not None:
        diagnostics.append(diagnostic)


def merge_session_start_hook(
    settings: dict[str, Any],
    descriptor: HookDescriptor,
    diagnostics: list[HookDiagnostic] | None = None,
) -> dict[str, Any]:
    """
    Merge a SessionStart hook entry into user settings.

    Top-level keys and other hook events are shallow-copied through unchanged.
    The new entry is appended after any existing SessionStart entries. The
    input dict is not modified.

    A ``hooks`` value that is not an object, or a ``SessionStart`` value that is
    not a list, is replaced and a warning diagnostic is recorded.

    Args:
        settings: Loaded user settings
        descriptor: Hook entry to register
        diagnostics: Optional list that receives coercion diagnostics

    Returns:
        New settings dict with the hook registered
    """
    merged = dict(settings)

    hooks = settings.get("hooks")
    if hooks is None:
        hooks = {}
    elif not isinstance(hooks, dict):
        _record(
            diagnostics,
            HookDiagnostic(
                severity="warning",
                message=f"Replacing non-object 'hooks' value ({type(hooks).__name__})",
            ),
        )
        hooks = {}

    merged_hooks = dict(hooks)

    existing = merged_hooks.get(SESSION_START_EVENT)
    if existing is None:
        existing = []
    elif not isinstance(existing, list):
        _record(
            diagnostics,
            HookDiagnostic(
                severity="warning",
                message=(
                    f"Replacing non-array 'hooks.{SESSION_START_EVENT}' value "
                    f"({type(existing).__name__})"
                ),
            ),
        )
        existing = []

    merged_hooks[SESSION_START_EVENT] = [*existing, descriptor.to_settings_entry()]
    merged["hooks"] = merged_hooks
    return merged


def cleanup_hook_settings_file(
    file_path: Path | str,
    diagnostics: list[HookDiagnostic] | None = None,
) -> None:
    """
    Remove a generated hook settings file.

    Missing files are ignored. Any OSError is logged and swallowed so shutdown
    paths can always proceed.

    Args:
        file_path: Path previously returned by generation
        diagnostics: Optional list that receives a diagnostic on failure
    """
    path = Path(file_path)
    try:
        if path.exists():
            path.unlink()
            logger.debug(f"[hook-settings] Cleaned up hook settings file: {path}")
    except OSError as e:
        _record(
            diagnostics,
            HookDiagnostic(
                severity="debug",
                message=f"Failed to clean up hook settings file: {e}",
                file_path=str(path),
                error=str(e),
            ),
        )


class HookSettingsGenerator:
    """
    Generates and removes the per-process hook settings file.

    All filesystem locations come from the injected config, and the process id
    can be overridden, so tests can point the generator anywhere.

    diagnostics holds the records of the most recent generate() call plus any
    cleanup() failures since then.

    Example:
        >>> generator = HookSettingsGenerator(load_config())
        >>> path = generator.generate(8080)
        >>> # ... launch claude --settings <path> ...
        >>> generator.cleanup(path)
    """

    def __init__(self, config: HookSettingsConfig, *, pid: int | None = None):
        """
        Initialize the generator.

        Args:
            config: Locations and runtime for the generated hook command
            pid: Process id embedded in the file name (defaults to os.getpid())
        """
        self.config = config
        self.pid = os.getpid() if pid is None else pid
        self.diagnostics: list[HookDiagnostic] = []
        self.last_load: SettingsLoadResult | None = None

    @property
    def settings_file(self) -> Path:
        """Absolute path of this process's generated settings file."""
        return (self.config.hooks_dir / settings_file_name(self.pid)).absolute()

    def forwarder_script_path(self) -> Path:
        """Absolute path of the forwarder script invoked by the hook."""
        root = self.config.install_root
        if root is None:
            root = get_install_root()
        return (root / self.config.forwarder_script).absolute()

    def build_descriptor(self, port: int) -> HookDescriptor:
        """Build the SessionStart hook entry for a listener port."""
        command = build_hook_command(self.config.runtime, self.forwarder_script_path(), port)
        return HookDescriptor(matcher=MATCH_ALL, hooks=[HookCommand(command=command)])

    def load_user_settings(self) -> SettingsLoadResult:
        """
        Read the user settings file.

        Never raises: an absent file yields status "missing", and unreadable
        or malformed content yields status "recovered" with empty settings.
        NaN/Infinity literals and nesting past the recursion limit count as
        malformed.
        """
        path = self.config.user_settings_path
        try:
            if not path.exists():
                logger.debug(f"[hook-settings] No user settings at {path}")
                return SettingsLoadResult(status="missing", path=path)

            with path.open("r", encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except (OSError, ValueError, RecursionError) as e:
            diagnostic = HookDiagnostic(
                severity="debug",
                message=f"Failed to load user settings: {e}",
                file_path=str(path),
                error=str(e),
            )
            _record(self.diagnostics, diagnostic)
            return SettingsLoadResult(status="recovered", path=path, diagnostic=diagnostic)

        if not isinstance(data, dict):
            diagnostic = HookDiagnostic(
                severity="debug",
                message=(
                    f"Ignoring user settings: expected a JSON object, got {type(data).__name__}"
                ),
                file_path=str(path),
            )
            _record(self.diagnostics, diagnostic)
            return SettingsLoadResult(status="recovered", path=path, diagnostic=diagnostic)

        logger.debug(f"[hook-settings] Loaded user settings from: {path}")
        return SettingsLoadResult(status="loaded", path=path, settings=data)

    def generate(self, port: int) -> Path:
        """
        Generate the hook settings file for a listener port.

        Args:
            port: Port the session notification server listens on

        Returns:
            Absolute path of the generated settings file

        Raises:
            ValueError: If port is not a positive integer
            FilesystemError: If the hooks directory or the file cannot be written
        """
        if isinstance(port, bool) or not isinstance(port, int) or port <= 0:
            raise ValueError(f"port must be a positive integer, got {port!r}")

        self.diagnostics = []
        hooks_dir = self.config.hooks_dir
        try:
            hooks_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError("Failed to create hooks directory", hooks_dir, e) from e

        descriptor = self.build_descriptor(port)
        script = self.forwarder_script_path()
        if not script.exists():
            _record(
                self.diagnostics,
                HookDiagnostic(
                    severity="warning",
                    message=f"Forwarder script not found at {script}",
                    file_path=str(script),
                ),
            )

        self.last_load = self.load_user_settings()
        merged = merge_session_start_hook(self.last_load.settings, descriptor, self.diagnostics)

        settings_file = self.settings_file
        try:
            with settings_file.open("w", encoding="utf-8") as f:
                json.dump(merged, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise FilesystemError("Failed to write hook settings file", settings_file, e) from e

        logger.debug(f"[hook-settings] Created hook settings file: {settings_file}")
        return settings_file

    def cleanup(self, file_path: Path | str) -> None:
        """Remove a generated settings file, recording any failure as a diagnostic."""
        cleanup_hook_settings_file(file_path, self.diagnostics)


def generate_hook_settings_file(port: int, config: HookSettingsConfig | None = None) -> Path:
    """
    Generate a hook settings file using the loaded (or given) configuration.

    Args:
        port: Port the session notification server listens on
        config: Configuration to use instead of load_config()

    Returns:
        Absolute path of the generated settings file
    """
    return HookSettingsGenerator(config or load_config()).generate(port)
