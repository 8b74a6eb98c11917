"""Shared fixtures for fallible tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest
from fallible import _config
from fallible._logging import add_log_hook, clear_log_hooks, configure_logging
from hypothesis import HealthCheck, settings

if TYPE_CHECKING:
    from collections.abc import Generator

# Property tests never touch config or hooks; one reset per test covers all examples.
settings.register_profile('fallible', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('fallible')


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test with default config, no hooks and a quiet root logger."""
    monkeypatch.delenv('FALLIBLE_CAPTURE', raising=False)
    monkeypatch.delenv('FALLIBLE_LOG_LEVEL', raising=False)
    _config.reset()
    clear_log_hooks()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    _config.reset()
    clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def captured_logs() -> list[dict[str, Any]]:
    """Configure DEBUG logging and collect every event dict through a hook."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    return received


class Probe:
    """Iterable that records how many elements were pulled from it."""

    def __init__(self, items: list[Any]) -> None:
        self.items = items
        self.pulled = 0

    def __iter__(self) -> Generator[Any]:
        for item in self.items:
            self.pulled += 1
            yield item


@pytest.fixture
def probe() -> type[Probe]:
    """Factory for pull-counting iterables."""
    return Probe
