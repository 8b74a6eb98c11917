"""Library configuration: which exceptions Try captures, and log level."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from fallible._logging import configure_logging, get_logger

__all__ = [
    'CaptureMode',
    'Config',
    'captured_types',
    'get_config',
    'init',
    'reset',
]

logger = get_logger(__name__)


class CaptureMode(Enum):
    """Which exception family Try operators turn into Failure."""

    EXCEPTION = 'exception'
    ALL = 'all'


@dataclass(frozen=True)
class Config:
    """Configuration for fallible.

    Attributes:
        capture: Capture mode. EXCEPTION leaves KeyboardInterrupt, SystemExit
            and GeneratorExit propagating; ALL captures every BaseException.
        log_level: Logging level (e.g., "DEBUG"). None = silent.
    """

    capture: CaptureMode = CaptureMode.EXCEPTION
    log_level: str | None = None


_config: Config | None = None


def _detect_capture_mode() -> CaptureMode:
    """Read FALLIBLE_CAPTURE, falling back to EXCEPTION."""
    env_capture = os.environ.get('FALLIBLE_CAPTURE', '').strip().lower()
    if not env_capture:
        return CaptureMode.EXCEPTION
    try:
        return CaptureMode(env_capture)
    except ValueError:
        logger.warning('unknown_capture_mode', value=env_capture, default=CaptureMode.EXCEPTION.value)
        return CaptureMode.EXCEPTION


def _detect_log_level() -> str | None:
    return os.environ.get('FALLIBLE_LOG_LEVEL') or None


def init(
    capture: CaptureMode | str | None = None,
    log_level: str | None = None,
) -> Config:
    """Set the active configuration.

    Args:
        capture: Capture mode, as enum or case-insensitive string.
            Read from FALLIBLE_CAPTURE if None.
        log_level: Logging level. Read from FALLIBLE_LOG_LEVEL if None;
            when resolved, logging is configured at that level.

    Returns:
        The Config that was set.

    Example:
        ```python
        import fallible

        fallible.init(capture='all', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if capture is None:
        resolved_capture = _detect_capture_mode()
    elif isinstance(capture, str):
        resolved_capture = CaptureMode(capture.lower())
    else:
        resolved_capture = capture

    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = Config(capture=resolved_capture, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> Config:
    """Get the active configuration.

    Without a prior ``init()``, the environment is read once and the
    result cached; logging is left untouched in that case.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = Config(capture=_detect_capture_mode(), log_level=_detect_log_level())
    return _config


def reset() -> None:
    """Forget the active configuration."""
    global _config  # noqa: PLW0603
    _config = None


def captured_types(config: Config | None = None) -> tuple[type[BaseException], ...]:
    """Exception classes that Try operators capture under ``config``."""
    mode = (config or get_config()).capture
    if mode is CaptureMode.ALL:
        return (BaseException,)
    return (Exception,)
