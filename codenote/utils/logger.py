"""Logging configuration using Loguru."""

import sys
from pathlib import Path

from loguru import logger

from codenote.config import LoggingConfig

# Records logged without get_logger() still carry a module tag
DEFAULT_MODULE = "codenote"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} - {message}"
)


def setup_logging(config: LoggingConfig | None = None) -> list[int]:
    """
    Configure Loguru sinks from a LoggingConfig.

    Args:
        config: Logging settings (defaults if not given)

    Returns:
        Handler ids of the sinks that were added
    """
    config = config or LoggingConfig()
    logger.remove()
    logger.configure(extra={"module": DEFAULT_MODULE})

    handler_ids = [
        logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT, colorize=True)
    ]

    if config.log_to_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        handler_ids.append(
            logger.add(
                log_path / "codenote_{time:YYYY-MM-DD}.log",
                level=config.level,
                format=FILE_FORMAT,
                rotation=config.file_rotation,
                retention=config.file_retention,
                compression=config.compression,
                serialize=config.serialize,
                enqueue=True,
            )
        )

    return handler_ids


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)
