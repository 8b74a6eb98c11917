"""Try type: Success[T] | Failure for computations that may raise.

``of`` and ``run`` execute a computation once, inline, and capture what it
raises. Every operator that calls user code (map, flat_map, recover,
recover_with, filter) captures exceptions from that call into a new Failure.
Which exceptions count is decided by ``fallible.captured_types()``: by default
every ``Exception``, leaving KeyboardInterrupt, SystemExit and GeneratorExit to
propagate.

Example:
    ```python
    from fallible import try_

    parsed = try_.of(lambda: int('abc'))
    parsed.is_failure()  # True
    parsed.recover(lambda exc: 0).get()  # 0
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, final

import msgspec

from fallible._config import captured_types
from fallible._internal import require, require_container, sealed
from fallible._logging import get_logger
from fallible.errors import ArgumentError, Fault, FaultError, NotFoundError, PredicateError

if TYPE_CHECKING:
    from fallible.option import Option
    from fallible.result import Err, Ok, Result

__all__ = [
    'Failure',
    'Success',
    'Try',
    'failure',
    'from_option',
    'from_result',
    'of',
    'run',
    'sequence',
    'success',
    'traverse',
]

logger = get_logger(__name__)


@sealed
@final
@dataclass(slots=True, frozen=True)
class Success[T]:
    """Successful outcome of a computation, holding its value.

    Attributes:
        value: The computed value. May be None (``run`` produces Success(None)).
    """

    value: T

    def __repr__(self) -> str:
        return f'Success({self.value!r})'

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[Any]]:
        """Return False since this is Success."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_cause(self) -> NoReturn:
        """Raise since a Success has no cause.

        Raises:
            NotFoundError: Always, with ``branch='cause'``.
        """
        msg = f'No cause present. Try is a Success for value: {self.value!r}'
        raise NotFoundError(msg, branch='cause')

    def get_or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def get_or_else_compute(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def get_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_throw(self, exception_mapper: Callable[[BaseException], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the contained value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Try[U]:
        """Apply ``f`` to the value, capturing anything it raises.

        Args:
            f: Function to apply to the value.

        Returns:
            Success(f(value)), or Failure of the exception ``f`` raised.
        """
        try:
            return Success(f(self.value))
        except captured_types() as exc:
            return _captured(exc, 'map')

    def flat_map[U](self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Apply a function that returns a Try, capturing anything the call raises.

        A Failure returned by ``f`` is passed through untouched. ``f``
        returning None or a non-Try is captured as Failure(ArgumentError).
        """
        try:
            return require_container(f(self.value), 'flat_map mapper result', TRY_TYPES, 'a Try')
        except captured_types() as exc:
            return _captured(exc, 'flat_map')

    def recover(self, f: Callable[[BaseException], T]) -> Success[T]:  # noqa: ARG002
        """Return this same instance; nothing to recover from."""
        return self

    def recover_with(self, f: Callable[[BaseException], Try[T]]) -> Success[T]:  # noqa: ARG002
        """Return this same instance; nothing to recover from."""
        return self

    def filter(
        self,
        predicate: Callable[[T], bool],
        fault_supplier: Callable[[], BaseException] | None = None,
    ) -> Try[T]:
        """Keep self if the predicate holds, else fail.

        Args:
            predicate: Test applied to the value.
            fault_supplier: Produces the exception for a failed predicate.
                Defaults to PredicateError.

        Returns:
            Self, Failure of the supplied exception, or Failure of whatever
            the predicate or supplier raised.
        """
        try:
            if predicate(self.value):
                return self
            return Failure(fault_supplier() if fault_supplier is not None else PredicateError())
        except captured_types() as exc:
            return _captured(exc, 'filter')

    def on_success(self, action: Callable[[T], Any]) -> Success[T]:
        """Call ``action`` with the value and return self."""
        action(self.value)
        return self

    def on_failure(self, action: Callable[[BaseException], Any]) -> Success[T]:  # noqa: ARG002
        """Return self; the action only runs on Failure."""
        return self

    def fold[R](self, on_success: Callable[[T], R], on_failure: Callable[[BaseException], R]) -> R:  # noqa: ARG002
        """Return ``on_success(value)``."""
        return on_success(self.value)

    def to_option(self) -> Option[T]:
        """Convert to Option; a Success holding None becomes Nothing."""
        from fallible.option import of_nullable

        return of_nullable(self.value)

    def to_result(self) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from fallible.result import Ok

        return Ok(self.value)


@sealed
@final
@dataclass(slots=True, frozen=True)
class Failure[T]:
    """Failed outcome of a computation, holding the exception it raised.

    Attributes:
        cause: The captured exception. Never None.

    Raises:
        ArgumentError: On construction, if ``cause`` is None or not an exception.
    """

    cause: BaseException

    def __post_init__(self) -> None:
        require(self.cause, 'cause')
        if not isinstance(self.cause, BaseException):
            msg = f'cause must be an exception, got {type(self.cause).__name__}'
            raise ArgumentError(msg)

    def __repr__(self) -> str:
        return f'Failure({self.cause!r})'

    @property
    def fault(self) -> Fault:
        """Snapshot of the cause and its chain."""
        return Fault.of(self.cause)

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return True since this is Failure."""
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NotFoundError: Always, chained to the captured cause.
        """
        msg = 'No value present. Try is a Failure.'
        raise NotFoundError(msg, branch='value') from self.cause

    def get_cause(self) -> BaseException:
        """Return the captured exception."""
        return self.cause

    def get_or_else(self, fallback: T) -> T:
        """Return the fallback."""
        return fallback

    def get_or_else_compute(self, supplier: Callable[[], T]) -> T:
        """Compute and return the fallback."""
        return supplier()

    def get_or_none(self) -> None:
        """Return None."""
        return None

    def get_or_throw(self, exception_mapper: Callable[[BaseException], BaseException] | None = None) -> NoReturn:
        """Raise the failure.

        Without a mapper, an ``Exception`` cause is re-raised as-is and any
        other ``BaseException`` is wrapped in FaultError. With a mapper,
        ``exception_mapper(cause)`` is raised unconditionally.

        Raises:
            BaseException: The cause, FaultError, or the mapped exception.
        """
        if exception_mapper is not None:
            raise exception_mapper(self.cause)
        if isinstance(self.cause, Exception):
            raise self.cause
        raise FaultError(self.cause) from self.cause

    def map(self, f: Callable[[Any], Any]) -> Failure[T]:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> Failure[T]:  # noqa: ARG002
        """Return self unchanged; the original cause is kept and ``f`` is not called."""
        return self

    def recover(self, f: Callable[[BaseException], T]) -> Try[T]:
        """Return Success(f(cause)), capturing anything ``f`` raises."""
        try:
            return Success(f(self.cause))
        except captured_types() as exc:
            return _captured(exc, 'recover')

    def recover_with(self, f: Callable[[BaseException], Try[T]]) -> Try[T]:
        """Return the Try produced by ``f(cause)``, capturing anything the call raises."""
        try:
            return require_container(f(self.cause), 'recover_with result', TRY_TYPES, 'a Try')
        except captured_types() as exc:
            return _captured(exc, 'recover_with')

    def filter(self, predicate: Callable[[Any], bool], fault_supplier: Any = None) -> Failure[T]:  # noqa: ARG002
        """Return self without calling the predicate."""
        return self

    def on_success(self, action: Callable[[Any], Any]) -> Failure[T]:  # noqa: ARG002
        """Return self; the action only runs on Success."""
        return self

    def on_failure(self, action: Callable[[BaseException], Any]) -> Failure[T]:
        """Call ``action`` with the cause and return self."""
        action(self.cause)
        return self

    def fold[R](self, on_success: Callable[[Any], R], on_failure: Callable[[BaseException], R]) -> R:  # noqa: ARG002
        """Return ``on_failure(cause)``."""
        return on_failure(self.cause)

    def to_option(self) -> Option[Any]:
        """Convert to Option, dropping the cause."""
        from fallible.option import Nothing

        return Nothing

    def to_result(self) -> Err[BaseException]:
        """Convert to Result, returning Err(cause)."""
        from fallible.result import Err

        return Err(self.cause)


type Try[T] = Success[T] | Failure[T]

TRY_TYPES = (Success, Failure)


def _captured(exc: BaseException, operation: str) -> Failure[Any]:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('fault_captured', operation=operation, **msgspec.to_builtins(Fault.of(exc)))
    return Failure(exc)


# ---------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------


def of[T](computation: Callable[[], T]) -> Try[T]:
    """Run ``computation`` once and capture its outcome.

    Args:
        computation: Zero-argument callable. Called inline, exactly once.

    Returns:
        Success of the returned value, or Failure of the captured exception.

    Examples:
        >>> of(lambda: 10 // 2)
        Success(5)
        >>> of(lambda: 1 // 0).is_failure()
        True
    """
    require(computation, 'computation')
    try:
        return Success(computation())
    except captured_types() as exc:
        return _captured(exc, 'of')


def run(action: Callable[[], Any]) -> Try[None]:
    """Run ``action`` for its side effect; Success(None) if it does not raise."""
    require(action, 'action')
    try:
        action()
    except captured_types() as exc:
        return _captured(exc, 'run')
    return Success(None)


def success[T](value: T) -> Success[T]:
    """Wrap ``value`` in Success without running anything."""
    return Success(value)


def failure(cause: BaseException) -> Failure[Any]:
    """Wrap ``cause`` in Failure without running anything."""
    return Failure(cause)


# ---------------------------------------------------------------------
# Interop
# ---------------------------------------------------------------------


def from_result[T](result: Result[T, BaseException]) -> Try[T]:
    """Ok(v) becomes Success(v); Err(e) becomes Failure(e).

    Raises:
        ArgumentError: If ``result`` is not a Result, or an Err's error is not
            an exception.
    """
    from fallible.result import RESULT_TYPES, Ok

    require_container(result, 'result', RESULT_TYPES, 'a Result')
    if isinstance(result, Ok):
        return Success(result.value)
    return Failure(result.error)


def from_option[T](option: Option[T], fault_supplier: Callable[[], BaseException]) -> Try[T]:
    """Some(v) becomes Success(v); Nothing becomes Failure(fault_supplier())."""
    from fallible.option import OPTION_TYPES

    require_container(option, 'option', OPTION_TYPES, 'an Option')
    require(fault_supplier, 'fault_supplier')
    return option.to_try(fault_supplier)


# ---------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------


def sequence[T](tries: Iterable[Try[T]]) -> Try[tuple[T, ...]]:
    """Collect an iterable of Trys, returning the first Failure as-is.

    Elements after the first Failure are never pulled.
    """
    require(tries, 'tries')
    values: list[T] = []
    for attempt in tries:
        if attempt is None:
            msg = 'tries contains a None element'
            raise ArgumentError(msg)
        if isinstance(require_container(attempt, 'tries element', TRY_TYPES, 'a Try'), Failure):
            return attempt
        values.append(attempt.value)
    return Success(tuple(values))


def traverse[A, T](values: Iterable[A], mapper: Callable[[A], Try[T]]) -> Try[tuple[T, ...]]:
    """Map each value to a Try and collect, stopping at the first Failure.

    An exception raised by ``mapper`` is captured and ends the traversal like
    a returned Failure would.

    Args:
        values: Input values. May be a one-shot iterator.
        mapper: Function from a value to a Try.

    Returns:
        Success of a tuple with the mapped values in order, or the first Failure.

    Raises:
        ArgumentError: If ``values`` or ``mapper`` is None, or a value is None.
    """
    require(values, 'values')
    require(mapper, 'mapper')
    out: list[T] = []
    for value in values:
        if value is None:
            msg = 'values contains a None element'
            raise ArgumentError(msg)
        try:
            mapped = require_container(mapper(value), 'traverse mapper result', TRY_TYPES, 'a Try')
        except captured_types() as exc:
            return _captured(exc, 'traverse')
        if isinstance(mapped, Failure):
            return mapped
        out.append(mapped.value)
    return Success(tuple(out))
