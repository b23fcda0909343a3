"""
Hook data models for sessionhook.

Defines the SessionStart hook entry written into generated settings files and
the diagnostic records produced while generating or cleaning them up.

A hook entry serializes to the shape Claude Code expects under
``hooks.<EventName>`` in settings.json:

    {"matcher": "*", "hooks": [{"type": "command", "command": "..."}]}
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

SESSION_START_EVENT = "SessionStart"
MATCH_ALL = "*"


class HookCommand(BaseModel):
    """A single command action run by Claude Code when a hook fires."""

    type: Literal["command"] = Field(default="command", description="Action type")
    command: str = Field(description="Shell-invokable command string")


class HookDescriptor(BaseModel):
    """One registered action for a lifecycle event."""

    matcher: str = Field(default=MATCH_ALL, description="Event subtype pattern, * for all")
    hooks: list[HookCommand] = Field(default_factory=list, description="Actions to run")

    def to_settings_entry(self) -> dict[str, Any]:
        """Serialize to a plain dict for embedding in settings.json."""
        return self.model_dump(mode="json")


class HookDiagnostic(BaseModel):
    """Represents a recovered failure or notable condition during generation or cleanup."""

    severity: Literal["error", "warning", "info", "debug"] = Field(
        description="Issue severity: error, warning, info, debug"
    )
    message: str = Field(description="Human-readable issue description")
    file_path: str | None = Field(default=None, description="Related file path if applicable")
    error: str | None = Field(default=None, description="Underlying exception text if any")


class SettingsLoadResult(BaseModel):
    """
    Outcome of reading the user settings file.

    status is "loaded" when the file parsed to an object, "missing" when no
    file exists, and "recovered" when reading or parsing failed and empty
    settings were substituted.
    """

    status: Literal["loaded", "missing", "recovered"]
    path: Path
    settings: dict[str, Any] = Field(default_factory=dict)
    diagnostic: HookDiagnostic | None = None

    @property
    def recovered(self) -> bool:
        return self.status == "recovered"
