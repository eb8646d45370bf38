"""Logging setup for command-line use."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(
    name: str = "trialpico",
    enable_console_logging: bool = True,
    level: int = logging.INFO,
) -> logging.Logger:
    """Return the package logger, attaching a stderr handler once.

    Args:
        name: Logger name; children such as trialpico.engine propagate to it
        enable_console_logging: Attach a console handler
        level: Logging level for the logger

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if enable_console_logging and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
