"""Logging configuration using loguru.

Logs go to a daily file under the log directory and are kept for 1 week.
Nothing is written to stdout so that generated stylesheets piped from the
CLI stay clean and the preview TUI is not disturbed.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Default ~/.local/share/wikitheme/logs, overridable via WIKITHEME_LOG_DIR
_default_log_dir = Path.home() / ".local" / "share" / "wikitheme" / "logs"
LOG_DIR = Path(os.environ.get("WIKITHEME_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.configure(extra={"name": "wikitheme"})
logger.add(
    LOG_DIR / "wikitheme_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format=LOG_FORMAT,
    rotation="00:00",  # New file at midnight
    retention="1 week",
    compression="gz",
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_tui_sink(sink_func: Callable[[object], None], level: str = "WARNING") -> int:
    """Add a sink that forwards log messages to a widget.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    return logger.add(sink_func, level=level, format="{message}")


def remove_tui_sink(sink_id: int) -> None:
    """Remove a sink previously added with add_tui_sink.

    Args:
        sink_id: The sink ID returned by add_tui_sink.
    """
    logger.remove(sink_id)
