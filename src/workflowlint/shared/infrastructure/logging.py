"""
Structured logging configuration using structlog.

Config loading is usable as a library, so only the ``workflowlint`` logger
namespace gets a handler; the root logger of a host application is left alone.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

from workflowlint.shared.domain.exceptions import ConfigurationError
from workflowlint.shared.infrastructure.config import settings

LOGGER_NAMESPACE = "workflowlint"


def resolve_level(name: str | None = None) -> int:
    """
    Turn a level name (e.g. "debug", "WARNING") into a logging level.

    Falls back to ``settings.log_level`` when no name is given.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    name = (name or settings.log_level).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(
            f"unknown log level {name!r}",
            context={"setting": "WORKFLOWLINT_LOG_LEVEL"},
        )
    return level


def _renderer(stream: TextIO) -> Any:
    # Development: readable lines, colored only on a terminal
    if settings.is_development:
        return structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.processors.JSONRenderer()


def configure_logging(stream: TextIO | None = None, level: str | None = None) -> None:
    """
    Configure structlog and the ``workflowlint`` stdlib logger.

    Args:
        stream: Destination of log lines (stderr at call time by default)
        level: Level name overriding ``settings.log_level`` (the CLI passes
            "DEBUG" for --verbose)
    """
    stream = stream if stream is not None else sys.stderr
    log_level = resolve_level(level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if not settings.is_development:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(stream))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__, i.e. under ``workflowlint``)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("config_loaded", path=".github/actionlint.yaml")
    """
    return structlog.get_logger(name)
