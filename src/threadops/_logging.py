"""Structured logging for threadops.

Every library event goes through a structlog wrapper around a stdlib logger
in the `threadops` namespace. That namespace carries only a `NullHandler`
until `configure_logging()` attaches a structlog `ProcessorFormatter`
handler, so an application that never configures threadops sees nothing.
The global structlog configuration and the root logger are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'reset_logging',
]

LOGGER_NAME = 'threadops'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _qualify(name: str | None) -> str:
    """Place name under the threadops logger namespace."""
    if not name or name == LOGGER_NAME:
        return LOGGER_NAME
    if name.startswith(f'{LOGGER_NAME}.'):
        return name
    return f'{LOGGER_NAME}.{name}'


def _get_processors() -> list[Any]:
    # filter_by_level runs first so disabled levels cost no rendering.
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger under `threadops`.

    Args:
        name: Logger name, usually the calling module's `__name__`. Names
            outside the namespace are nested under it.

    Returns:
        A structlog BoundLogger that renders only once logging is configured.
    """
    return structlog.wrap_logger(
        logging.getLogger(_qualify(name)),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Render threadops events to stderr at the given level.

    Replaces any handler previously installed here; calling it twice does
    not duplicate output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def reset_logging() -> None:
    """Return the threadops logger to its silent, unconfigured state."""
    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(logging.NullHandler())
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
