"""Logging setup and utilities."""

import logging

from .ansi import LogStyles, make_style, should_colorize
from .debug import is_debug, set_debug

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
]


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []
    names: set[str] = set()


class ScreenLogFormatter(logging.Formatter):
    """A formatter adding colors based on log level.

    Respects NO_COLOR environment variable and TTY detection.
    """

    def __init__(self) -> None:
        super().__init__()
        log_format = r"%(name)s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        styles = {
            logging.DEBUG: LogStyles.DEBUG,
            logging.WARNING: LogStyles.WARNING,
            logging.ERROR: LogStyles.ERROR,
            logging.CRITICAL: LogStyles.CRITICAL,
        }
        use_colors = should_colorize()
        self._formatters: dict[int, logging.Formatter] = {}
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            prefix, suffix = make_style(*styles[level]) if use_colors and level in styles else ("", "")
            self._formatters[level] = logging.Formatter(prefix + log_format + suffix)

    def format(self, record: logging.LogRecord) -> str:
        return self._formatters.get(record.levelno, self._formatters[logging.INFO]).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter())
    LogObjects.handlers.append(stream_handler)

    # Loggers created at import time pick up the new handlers and level
    for name in sorted(LogObjects.names):
        get_logger(name)


def get_logger(name: str = "neo", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    LogObjects.names.add(name)
    for handler in LogObjects.handlers:
        logger.addHandler(handler)
    return logger
