"""
Configuration models and loading.

This module provides the Pydantic model for sessionhook configuration
with multi-layer merging: defaults < user < env vars.
"""

from .loader import (
    clear_cache,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import DEFAULT_FORWARDER_SCRIPT, HookSettingsConfig

__all__ = [
    # Models
    "DEFAULT_FORWARDER_SCRIPT",
    "HookSettingsConfig",
    # Loader functions
    "clear_cache",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
]
