"""Argument guards and the closed-variant class decorator."""

from __future__ import annotations

from typing import Any

from fallible.errors import ArgumentError

__all__ = ['require', 'require_container', 'sealed']


def require[T](value: T | None, name: str) -> T:
    """Return ``value``, or raise ArgumentError if it is None."""
    if value is None:
        msg = f'{name} must not be None'
        raise ArgumentError(msg)
    return value


def require_container[T](value: T | None, name: str, kinds: tuple[type, ...], label: str) -> T:
    """Return ``value`` if it is one of ``kinds``, else raise ArgumentError.

    Args:
        value: The argument to check.
        name: Parameter name used in the message.
        kinds: Accepted variant classes.
        label: Human name of the container, e.g. ``'an Option'``.
    """
    require(value, name)
    if not isinstance(value, kinds):
        msg = f'{name} must be {label}, got {type(value).__name__}'
        raise ArgumentError(msg)
    return value


def sealed[C: type](cls: C) -> C:
    """Make ``cls`` refuse subclassing at class-creation time."""

    def __init_subclass__(sub: type, **kwargs: Any) -> None:
        msg = f'{cls.__name__} is a closed variant and cannot be subclassed'
        raise TypeError(msg)

    cls.__init_subclass__ = classmethod(__init_subclass__)  # type: ignore[assignment]
    return cls
