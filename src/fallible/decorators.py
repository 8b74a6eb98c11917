"""Decorators that turn raising functions into container-returning ones.

``@attempt`` gives back a Try, ``@safe`` a Result. Both accept being applied
bare or called with keyword options, and work on functions and methods alike.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from fallible import try_
from fallible._config import captured_types
from fallible.result import Err, Ok, Result
from fallible.try_ import Success, Try

__all__ = ['attempt', 'safe']

type _Catch = tuple[type[BaseException], ...]


def _converting(
    func: Callable[..., Any] | None,
    catch: Callable[[], _Catch],
    on_return: Callable[[Any], Any],
    on_raise: Callable[[BaseException, Callable[..., Any]], Any],
) -> Any:
    """Build a wrapt decorator routing the call's outcome into a container.

    ``catch`` is consulted on every call so configuration changes apply to
    functions decorated earlier.
    """

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:  # noqa: ARG001
        caught = catch()
        try:
            value = wrapped(*args, **kwargs)
        except caught as exc:
            return on_raise(exc, wrapped)
        return on_return(value)

    return wrapper if func is None else wrapper(func)


@overload
def attempt[**P, T](func: Callable[P, T]) -> Callable[P, Try[T]]: ...


@overload
def attempt[**P, T](
    func: None = None,
    *,
    capture: _Catch | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Try[T]]]: ...


def attempt(func: Callable[..., Any] | None = None, *, capture: _Catch | None = None) -> Any:
    """Run every call of the decorated function inside a Try.

    Args:
        func: The function, when the decorator is used bare.
        capture: Exception types that become a Failure; anything else
            propagates. Defaults to ``captured_types()`` at call time.

    Example:
        ```python
        @attempt
        def port(text: str) -> int:
            return int(text)

        port('8080')  # Success(8080)
        port('http').recover(lambda exc: 80)  # Success(80)
        ```
    """

    def on_raise(exc: BaseException, wrapped: Callable[..., Any]) -> Try[Any]:
        return try_._captured(exc, getattr(wrapped, '__qualname__', 'attempt'))  # noqa: SLF001

    return _converting(func, lambda: capture if capture is not None else captured_types(), Success, on_raise)


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]: ...


@overload
def safe[**P, T](func: None = None) -> Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]: ...


def safe(func: Callable[..., Any] | None = None, *, exceptions: _Catch | None = None) -> Any:
    """Return Ok of the decorated function's value, or Err of what it raised.

    Unlike ``attempt`` the default is fixed to ``(Exception,)`` and does not
    follow the capture mode. A returned None stays ``Ok(None)``.

    Example:
        ```python
        @safe(exceptions=(KeyError,))
        def setting(name: str) -> str:
            return SETTINGS[name]

        setting('missing')  # Err(KeyError('missing'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)
    return _converting(func, lambda: catch, Ok, lambda exc, _: Err(exc))
