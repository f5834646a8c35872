"""Logging utilities for mprsa modules."""

import logging
from enum import Enum
from typing import Optional, Union

ROOT_LOGGER_NAME = 'mprsa'


class LogLevel(Enum):
    """Log levels accepted by configure_logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit setup_logging() calls. The logger will:
    - Live under the 'mprsa' namespace
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name relative to the package (e.g. 'arith.division')

    Returns:
        Configured logger instance
    """
    full_name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    logger = logging.getLogger(full_name)
    logger.propagate = True

    # Only set default level if root logger has no handlers
    # (i.e., basicConfig hasn't been called yet)
    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger


def _level_value(level: Union[LogLevel, int]) -> int:
    return level.value if isinstance(level, LogLevel) else int(level)


def configure_logging(
    level: Union[LogLevel, int] = LogLevel.INFO,
    enable_console: bool = True,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Existing handlers installed by a previous call are replaced, so calling
    this twice does not duplicate output. Levels of the `mprsa.*` child
    loggers are reset so that `level` applies to every package logger.

    Args:
        level: Minimum level for the package logger
        enable_console: Attach a stderr handler
        log_file: Optional path of a file to append records to

    Returns:
        The 'mprsa' logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    value = _level_value(level)
    logger.setLevel(value)

    # Child loggers inherit the package level
    prefix = f"{ROOT_LOGGER_NAME}."
    for name, child in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith(prefix) and isinstance(child, logging.Logger):
            child.setLevel(logging.NOTSET)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = DEBUG_FORMAT if value <= logging.DEBUG else DEFAULT_FORMAT

    if enable_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(fmt))
        logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.addHandler(file_handler)

    return logger
