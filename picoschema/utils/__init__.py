"""
Utility functions and helpers.

Components:
    - setup_logging: Route picoschema's log records through a Rich handler

Example:
    ```python
    from picoschema.utils import setup_logging

    setup_logging(level="DEBUG")
    ```
"""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure the ``picoschema`` logger to write to stderr via Rich.

    Calling it again replaces the previous handler instead of adding another.

    Args:
        level: Logging level name or number

    Returns:
        logging.Logger: The package logger
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("picoschema")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["setup_logging"]
