"""
config.py
=========
Builder configuration loaded from the environment or a .env file.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from cssforge.utils.files import get_env_path
from cssforge.utils.logging import setup_logging

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


@dataclass
class BuilderConfig:
    """Configuration shared by a builder and the selectors it creates.

    Attributes:
        strict_combinators: Reject combinators other than ' ', '>', '+', '~'. Defaults to False.
        log_level: Logging level name applied by setup_logging(). Defaults to 'WARNING'.
        logfire_token: Logfire write token. Defaults to None (nothing is exported).
    """

    strict_combinators: bool = False
    log_level: str = 'WARNING'
    logfire_token: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If the log level is not a known logging level.
        """
        self.log_level = self.log_level.upper()
        if self.log_level != 'ALL' and not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f'Unknown log level: {self.log_level}')

    def setup_logging(self) -> logging.Logger:
        """Configure console logging and logfire from this configuration."""
        return setup_logging(self.log_level, logfire_token=self.logfire_token)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f'{name} must be a boolean, got {raw!r}')


def load_config(env_file: str | Path | None = None) -> BuilderConfig:
    """Build a BuilderConfig from environment variables.

    Reads CSSFORGE_STRICT_COMBINATORS, CSSFORGE_LOG_LEVEL and LOGFIRE_TOKEN. Variables already
    set in the process environment win over values from the .env file.

    Args:
        env_file: Path to a .env file. Defaults to the .env in the project root.

    Returns:
        Loaded configuration.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_dotenv(env_file or get_env_path())

    return BuilderConfig(
        strict_combinators=_parse_bool(
            'CSSFORGE_STRICT_COMBINATORS', os.getenv('CSSFORGE_STRICT_COMBINATORS', 'false')
        ),
        log_level=os.getenv('CSSFORGE_LOG_LEVEL', 'WARNING'),
        logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
    )
