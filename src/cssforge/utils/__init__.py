"""Utility components for cssforge."""

from cssforge.utils.files import get_env_path, get_project_root
from cssforge.utils.logging import setup_logging

__all__ = [
    'get_env_path',
    'get_project_root',
    'setup_logging',
]
