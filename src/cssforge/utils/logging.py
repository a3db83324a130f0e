"""Logging configuration for cssforge."""

import logging

import logfire
from rich.logging import RichHandler


def setup_logging(level: str = 'INFO', logfire_token: str | None = None) -> logging.Logger:
    """Set up console logging and logfire.

    Configures the root logger with a rich console handler and configures
    logfire so builder events are exported only when a token is available.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO'). 'ALL' logs everything. Defaults to 'INFO'.
        logfire_token: Logfire write token. Defaults to None (nothing is sent).

    Returns:
        logging.Logger: The configured root logger.

    """
    # Map string level to numeric logging level
    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if not any(isinstance(handler, RichHandler) for handler in root_logger.handlers):
        console_handler = RichHandler(show_path=False, rich_tracebacks=True)
        console_handler.setLevel(numeric_level)
        root_logger.addHandler(console_handler)

    logfire.configure(token=logfire_token, send_to_logfire='if-token-present', console=False)

    return root_logger
