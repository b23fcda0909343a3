"""
Installation root discovery utilities for sessionhook.

The forwarder script referenced by generated hook settings ships inside the
sessionhook package, so its absolute path is resolved against the directory of
the installed package itself. Ancestor directories are never searched: a wheel
installed into a virtualenv inside some other project must not pick up that
project's files.
"""

from pathlib import Path

PACKAGE_NAME = "sessionhook"


def get_install_root(module_file: Path | str | None = None) -> Path:
    """
    Get the directory of the sessionhook package a module belongs to.

    Args:
        module_file: File inside the package. Defaults to this module.

    Returns:
        Absolute path to the nearest enclosing sessionhook package directory.

    Raises:
        FileNotFoundError: If the file is not inside a sessionhook package.

    Example:
        >>> get_install_root(Path("/venv/lib/site-packages/sessionhook/utils/project.py"))
        PosixPath('/venv/lib/site-packages/sessionhook')
    """
    start = Path(module_file if module_file is not None else __file__).resolve()

    for parent in start.parents:
        if parent.name == PACKAGE_NAME and (parent / "__init__.py").exists():
            return parent

    raise FileNotFoundError(
        f"Could not find installation root from {start}. "
        f"Expected a '{PACKAGE_NAME}' package directory containing __init__.py"
    )
