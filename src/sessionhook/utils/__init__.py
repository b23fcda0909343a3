"""Utility modules for sessionhook."""

from .project import get_install_root

__all__ = [
    "get_install_root",
]
