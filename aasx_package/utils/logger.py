"""
Logging setup for AASX packages.

The library only creates module loggers; handlers are installed by the
application (the CLI calls ``setup_logging``).
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "WARNING", use_rich: bool = True,
                  console: Optional[Console] = None) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level name
        use_rich: Whether to use rich logging
        console: Console to log to (defaults to stderr)
    """
    if level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    root_logger.addHandler(handler)
    logging.getLogger(__name__).debug(f"Logging initialized at {level.upper()} level")
