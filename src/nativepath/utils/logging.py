"""Logging setup for applications that use nativepath.

The package logs through loguru but stays silent until an application
opts in: ``nativepath/__init__.py`` disables the ``nativepath`` logger
namespace and ``configure_logging`` enables it again. Console output goes
to stderr so that command output on stdout stays machine-readable.
"""

import logging
import sys
from typing import TextIO

from loguru import logger

from nativepath.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # depth must point at the caller, past the logging module frames
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    config: LoggingConfig,
    *,
    level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Replace all loguru sinks with the ones described by ``config``.

    Args:
        config: LoggingConfig with level, format and file settings.
        level: Overrides ``config.level`` (the CLI's ``--verbose``).
        stream: Console stream; stderr by default.
    """
    level = level or config.level
    serialize = config.format == "json"
    fmt = "{message}" if serialize else CONSOLE_FORMAT

    logger.remove()
    logger.enable("nativepath")

    logger.add(
        stream or sys.stderr,
        format=fmt,
        level=level,
        serialize=serialize,
        colorize=not serialize and stream is None,
    )
    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging configured: level={} format={}", level, config.format)
