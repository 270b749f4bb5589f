"""
Logging setup for charchat, built on loguru.

Modules obtain a logger with ``get_logger(__name__)``; the process entry
point calls ``setup_logging`` once. Standard-library logging (uvicorn,
starlette) is routed into loguru so everything shares one format.
"""

import logging
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure loguru sinks.

    Args:
        level: Minimum level for all sinks.
        log_file: Optional path of a rotating log file.
    """
    level = level.upper()
    logger.remove()
    logger.configure(extra={"name": "charchat"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        logger.add(log_file, level=level, format=LOG_FORMAT, rotation="10 MB", retention=3)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


def get_logger(name: str):
    """Return a loguru logger bound to a module name."""
    return logger.bind(name=name)
