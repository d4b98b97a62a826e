"""Logging setup for the tablescope CLI."""
import logging
from typing import Union

from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configure the root logger. Safe to call more than once.

    Args:
        level: Logging level name ('DEBUG', 'INFO', ...) or number
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(name)s - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )
