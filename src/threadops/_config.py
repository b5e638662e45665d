"""Library configuration: Config dataclass, init() and get_config()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from threadops._logging import configure_logging, get_logger

__all__ = [
    'Config',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class Config:
    """Configuration for threadops.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


_config: Config | None = None

logger = get_logger(__name__)


def _detect_log_level() -> str | None:
    """Read THREADOPS_LOG_LEVEL, falling back to INFO for unknown names."""
    env_level = os.environ.get('THREADOPS_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logger.warning('config.unknown_log_level', source='THREADOPS_LOG_LEVEL', value=env_level, fallback='INFO')
        return 'INFO'
    return env_level


def _detect_json_output() -> bool:
    env_json = os.environ.get('THREADOPS_LOG_JSON', '').strip().lower()
    return env_json not in _FALSY


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> Config:
    """Initialize threadops configuration.

    Unset arguments are resolved from the environment:

    - THREADOPS_LOG_LEVEL: logging level name
    - THREADOPS_LOG_JSON: "0", "false", "no" or "off" selects console output

    Logging is configured only when a level is resolved.

    Args:
        log_level: Logging level. None = read from the environment.
        json_output: JSON log rendering. None = read from the environment.

    Returns:
        The stored Config.
    """
    global _config  # noqa: PLW0603

    if log_level is not None and log_level.upper() not in _LEVELS:
        logger.warning('config.unknown_log_level', source='init', value=log_level, fallback='INFO')
        log_level = 'INFO'

    config = Config(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_output)
        logger.debug('config.init', log_level=config.log_level, json_output=config.json_output)

    _config = config
    return config


def get_config() -> Config:
    """Return the configuration resolved by the last init() call.

    Nothing inside threadops reads it: the combinators take no settings, and
    init() has already applied the logging choice. It exists so callers can
    inspect which level and renderer were resolved from the environment.
    The first call without a prior init() runs init() with no arguments.
    """
    if _config is None:
        return init()
    return _config

