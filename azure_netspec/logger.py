"""Logger factory used by the command line entry point and the configurator."""

import logging
import sys
from logging import Formatter, Logger, StreamHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class StdoutFilter(logging.Filter):
    """Let through only records up to WARNING."""

    def filter(self, record):
        """Accept records with level lower or equal then WARNING."""
        return record.levelno <= logging.WARNING


class StderrFilter(logging.Filter):
    """Let through only records from ERROR up."""

    def filter(self, record):
        """Accept records with level greater or equal then ERROR."""
        return record.levelno >= logging.ERROR


def create_logger(name: str, level: str | int | None = None) -> Logger:
    """Create a logger splitting its records between stdout and stderr.

    Records up to WARNING go to stdout, ERROR and CRITICAL go to stderr. Handlers
    are attached only the first time a logger with the given name is created, so
    building the same logger twice does not duplicate lines.

    Args:
        name (str): logger name.
        level (str | int | None): logging level. When invalid the logger keeps its
            current level and the problem is reported on the logger itself.

    Returns:
        Logger: the configured logger.

    """
    logger = logging.getLogger(name)
    try:
        if level is not None:
            logger.setLevel(level)
        error_msg = None
    except ValueError:
        error_msg = f"Invalid log level: {level}"

    if not any(
        isinstance(f, StdoutFilter) for h in logger.handlers for f in h.filters
    ):
        formatter = Formatter(LOG_FORMAT)

        stdout_handler = StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        stdout_handler.addFilter(StdoutFilter())
        logger.addHandler(stdout_handler)

        stderr_handler = StreamHandler()
        stderr_handler.setFormatter(formatter)
        stderr_handler.addFilter(StderrFilter())
        logger.addHandler(stderr_handler)

    if error_msg is not None:
        logger.error(error_msg)

    return logger