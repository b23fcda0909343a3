"""
Configuration data models for sessionhook.

These models define the structure of ~/.config/sessionhook/config.json,
with validation and type safety via Pydantic.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FORWARDER_SCRIPT = "scripts/session_hook_forwarder.py"


def _default_home_dir() -> Path:
    return Path.home() / ".sessionhook"


def _default_user_settings_path() -> Path:
    return Path.home() / ".claude" / "settings.json"


class HookSettingsConfig(BaseModel):
    """
    Locations and commands used when generating hook settings files.

    The generator never looks these up on its own; everything it touches on
    disk is resolved from an instance of this model.
    """

    model_config = ConfigDict(validate_assignment=True)

    home_dir: Path = Field(
        default_factory=_default_home_dir,
        description="Application data root; generated files go under tmp/hooks",
    )
    user_settings_path: Path = Field(
        default_factory=_default_user_settings_path,
        description="User-level Claude settings merged into each generated file",
    )
    runtime: str = Field(
        default="python3",
        min_length=1,
        description="Interpreter used to invoke the forwarder script",
    )
    forwarder_script: str = Field(
        default=DEFAULT_FORWARDER_SCRIPT,
        min_length=1,
        description="Forwarder script path, relative to the installation root",
    )
    install_root: Optional[Path] = Field(
        default=None,
        description="Installation root; discovered from the package location if unset",
    )

    @field_validator("home_dir", "user_settings_path", "install_root", mode="before")
    @classmethod
    def expand_user(cls, v: object) -> object:
        """Expand a leading ~ in configured paths."""
        if isinstance(v, (str, Path)):
            return Path(v).expanduser()
        return v

    @property
    def hooks_dir(self) -> Path:
        """Directory holding generated per-process settings files."""
        return self.home_dir / "tmp" / "hooks"
