"""
Pytest configuration and shared fixtures.

Provides an isolated home directory, a HookSettingsConfig pointing into
tmp_path, and helpers for writing user settings files.
"""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from sessionhook.core.config import DEFAULT_FORWARDER_SCRIPT, HookSettingsConfig, clear_cache

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and XDG_CONFIG_HOME into tmp_path and drop SESSIONHOOK_* vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for name in ("SESSIONHOOK_HOME_DIR", "SESSIONHOOK_USER_SETTINGS", "SESSIONHOOK_RUNTIME"):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield home
    clear_cache()


# ==============================================================================
# Config Fixtures
# ==============================================================================


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Installation root containing the forwarder script."""
    root = tmp_path / "install root"
    script = root / DEFAULT_FORWARDER_SCRIPT
    script.parent.mkdir(parents=True)
    script.write_text("import sys\nprint(sys.argv[1])\n")
    return root


@pytest.fixture
def user_settings_path(tmp_path: Path) -> Path:
    """Location of the user's settings.json (not created)."""
    return tmp_path / "claude" / "settings.json"


@pytest.fixture
def hook_config(tmp_path: Path, install_root: Path, user_settings_path: Path) -> HookSettingsConfig:
    """HookSettingsConfig with every location inside tmp_path."""
    return HookSettingsConfig(
        home_dir=tmp_path / "app",
        user_settings_path=user_settings_path,
        install_root=install_root,
    )


@pytest.fixture
def write_user_settings(user_settings_path: Path) -> Callable[[Any], Path]:
    """Write JSON (or raw text) to the user settings path."""

    def _write(content: Any) -> Path:
        user_settings_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            user_settings_path.write_text(content, encoding="utf-8")
        else:
            user_settings_path.write_text(json.dumps(content), encoding="utf-8")
        return user_settings_path

    return _write
