"""
Logging setup for the splitter service.

Package modules log through ``logging.getLogger(__name__)``; this module only
attaches handlers to the ``semantic_splitter`` logger when the service runs.
The HTTP client used by ollama logs every request at INFO, so those loggers
are held at WARNING unless the service itself runs at DEBUG.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "semantic_splitter"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CLIENT_LOGGERS = ("httpx", "httpcore", "ollama")


def resolve_level(level: Union[int, str]) -> int:
    """Turn "debug" / "INFO" / 20 into a logging level number."""
    if isinstance(level, int):
        return level
    value = getattr(logging, level.strip().upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Args:
        level: Level number or name, e.g. SplitterServiceConfig.log_level
        log_file: Optional UTF-8 log file

    Returns:
        The ``semantic_splitter`` logger
    """
    level = resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    client_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)

    return logger
