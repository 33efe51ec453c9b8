"""Logging setup shared by the service, the CLI and uvicorn."""

import json
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "linkalias"

# uvicorn.error and uvicorn.access propagate to "uvicorn"
SERVER_LOGGER_NAME = "uvicorn"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _build_handlers(log_file: Optional[str], json_format: bool) -> List[logging.Handler]:
    if json_format:
        formatter: logging.Formatter = JSONFormatter(datefmt=DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _install(logger: logging.Logger, level: int, handlers: List[logging.Handler]) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    include_server: bool = True,
) -> logging.Logger:
    """Route linkalias (and uvicorn) logs through one set of handlers.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level name, case-insensitive
        log_file: Optional log file, written in addition to stdout
        json_format: Emit one JSON object per line
        include_server: Also take over the uvicorn loggers

    Returns:
        The ``linkalias`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    handlers = _build_handlers(log_file, json_format)

    logger = logging.getLogger(LOGGER_NAME)
    _install(logger, numeric_level, handlers)

    if include_server:
        _install(logging.getLogger(SERVER_LOGGER_NAME), numeric_level, handlers)

    return logger


def setup_logging_from_config(config) -> logging.Logger:
    """Configure logging from a ``linkalias.config.Config``."""
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the linkalias hierarchy."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
