"""Package logger for pointfree.

Curried functions and pipelines report their construction at DEBUG level
through ``logger``. Output goes to stdout and does not propagate to the
root logger, so applications embedding the package keep control of their
own handlers.
"""

import logging
import sys

from pointfree.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "pointfree",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name; child loggers use dotted names under ``pointfree``
        level: Level name such as DEBUG or WARNING; ``settings.LOG_LEVEL``
            when omitted
        format_string: Record format for the stdout handler

    Returns:
        The configured logger. Later calls with the same name return it
        unchanged.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Our own handler marks the logger as already set up
    if not _own_handlers(logger):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(level.upper())
        logger.propagate = False

    return logger


def _own_handlers(logger: logging.Logger) -> list:
    return [
        handler
        for handler in logger.handlers
        if type(handler) is logging.StreamHandler
    ]


logger = setup_logger()
