"""Environment loading helpers.

SESSIONHOOK_* overrides may live in .env files as well as the shell:
- OS environment (highest precedence)
- Working directory .env
- User .env (~/.config/sessionhook/.env)

A .env file never overrides a variable already exported in the process.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    out: dict[str, str] = {}
    for k, v in dotenv_values(path).items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def load_layered_env(
    *,
    cwd: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    local_env_paths: Iterable[Path] | None = None,
) -> set[str]:
    """Load environment variables from user + working directory .env files.

    Args:
        cwd: base directory for local env paths (defaults to the current directory)
        user_env_paths: explicit user env file paths
        local_env_paths: explicit local env file paths

    Returns:
        Names of the variables that were set by this call.
    """
    if cwd is None:
        cwd = Path.cwd()

    if user_env_paths is None:
        user_env_paths = [get_xdg_config_home() / "sessionhook" / ".env"]

    if local_env_paths is None:
        local_env_paths = [cwd / ".env"]

    user_set_keys: set[str] = set()
    for p in user_env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v
                user_set_keys.add(k)

    # Local values may replace user values but never pre-existing OS env
    loaded = set(user_set_keys)
    for p in local_env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ or k in user_set_keys:
                os.environ[k] = v
                loaded.add(k)

    return loaded
