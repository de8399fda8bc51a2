"""Logging setup for the command-line tool.

The library itself only logs through the standard ``logging`` module and
never installs handlers. ``configure_logging`` routes those records, along
with httpx's, into loguru with human-readable output on stderr.
"""

import logging
import sys

from loguru import logger


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure loguru for the command-line tool.

    Args:
        log_level: Minimum log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=None,
        backtrace=False,
        diagnose=False,
    )

    _intercept_standard_logging(log_level)


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _intercept_standard_logging(log_level: str) -> None:
    # loguru-only levels have no stdlib counterpart
    stdlib_level = {"TRACE": "DEBUG", "SUCCESS": "INFO"}.get(log_level, log_level)
    logging.basicConfig(handlers=[InterceptHandler()], level=stdlib_level, force=True)

    for name in ["smartrows", "httpx", "httpcore"]:
        logging.getLogger(name).setLevel(stdlib_level)
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False
