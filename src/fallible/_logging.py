"""Structured logging for fallible.

Library loggers are structlog BoundLoggers wrapped around stdlib loggers, and
``filter_by_level`` runs first in their chain. Until the application sets a
level (directly or through ``fallible.init(log_level=...)``) the stdlib tree
sits at WARNING and the DEBUG ``fault_captured`` events cost a level check.

Hooks see every event that passes the level filter, library events and
foreign stdlib records alike, before rendering.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'LogHook',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

# Replaced wholesale on every change, so a processor iterating it never sees
# a half-updated sequence.
_hooks: tuple[LogHook, ...] = ()

_DEFAULT_LOGGER = 'fallible'


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of each event dict from now on."""
    global _hooks  # noqa: PLW0603
    _hooks = (*_hooks, hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    global _hooks  # noqa: PLW0603
    _hooks = tuple(h for h in _hooks if h != hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    global _hooks  # noqa: PLW0603
    _hooks = ()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for hook in _hooks:
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: S112, BLE001
            continue
    return event_dict


def _enrichers() -> list[Any]:
    """Processors that add context; shared by library events and foreign records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _event_chain() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        *_enrichers(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _stderr_handler(json_output: bool) -> logging.Handler:
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send library and stdlib records to stderr as structured lines.

    Replaces the root logger's handlers. ``structlog.get_logger()`` loggers
    created by the application afterwards use the same chain.

    Args:
        level: Level name such as ``'DEBUG'``. Unknown names fall back to INFO.
        json_output: JSON lines if True, otherwise structlog's console renderer.
    """
    structlog.configure(
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(json_output)]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger over ``logging.getLogger(name)``.

    The result does not depend on ``structlog.configure``, so importing the
    library never changes how the application's own structlog loggers behave.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or _DEFAULT_LOGGER),
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
