"""Project root discovery used to locate configuration files."""

from pathlib import Path

ROOT_MARKERS = {'.git', 'pyproject.toml', '.env'}


def get_project_root() -> Path:
    """Find the project root by searching upwards from the current working directory.

    Stops at the first directory holding one of ROOT_MARKERS.
    """
    current_path = Path.cwd()

    for parent in [current_path, *current_path.parents]:
        if any((parent / marker).exists() for marker in ROOT_MARKERS):
            return parent

    # No marker anywhere (e.g. running in /tmp)
    return current_path


def get_env_path() -> Path:
    """Return the path of the .env file in the project root (it may not exist)."""
    return get_project_root() / '.env'
