"""Option type: Some[T] | Nothing for values that may be absent.

``None`` is never stored as a payload: ``Some(None)``, ``some(None)`` and a
``map`` whose function returns ``None`` all degrade to ``Nothing``.

Example:
    ```python
    from fallible import option, some

    some('hello').map(len).get()  # 5
    some(None)  # Nothing
    option.sequence([some(1), some(2)])  # Some((1, 2))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, final

from fallible._internal import require, require_container, sealed
from fallible.errors import ArgumentError, NotFoundError

if TYPE_CHECKING:
    from fallible.result import Err, Ok, Result
    from fallible.try_ import Failure, Success, Try

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'collect_present',
    'from_result',
    'from_try',
    'map2',
    'none',
    'of_nullable',
    'sequence',
    'some',
    'to_result',
    'to_try',
    'traverse',
]


@sealed
@final
@dataclass(slots=True, frozen=True)
class Some[T]:
    """Present variant of Option containing a value of type T.

    Constructing ``Some(None)`` returns ``Nothing`` instead.

    Attributes:
        value: The present value, never None.
    """

    value: T

    def __new__(cls, value: T) -> Any:
        if value is None:
            return Nothing
        return object.__new__(cls)

    def __getnewargs__(self) -> tuple[T]:
        return (self.value,)

    def __repr__(self) -> str:
        return f'Some({self.value!r})'

    def __iter__(self) -> Iterator[T]:
        """Yield the value once."""
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def get_or_else_compute(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def get_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_throw(self, exception_supplier: Callable[[], BaseException]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def map[U](self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply ``f`` to the value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some with the result, or Nothing if ``f`` returned None.
        """
        return of_nullable(f(self.value))

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by ``f``.

        Raises:
            ArgumentError: If ``f`` returns None or something that is not an Option.
        """
        return require_container(f(self.value), 'flat_map mapper result', OPTION_TYPES, 'an Option')

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def peek(self, action: Callable[[T], Any]) -> Some[T]:
        """Call ``action`` with the value and return self."""
        action(self.value)
        return self

    def peek_none(self, action: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Return self; the action only runs on Nothing."""
        return self

    def fold[R](self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:  # noqa: ARG002
        """Return ``on_some(value)``."""
        return on_some(self.value)

    def match(self, on_none: Callable[[], Any], on_some: Callable[[T], Any]) -> None:  # noqa: ARG002
        """Call ``on_some(value)`` for its side effect."""
        on_some(self.value)

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair this value with ``other``'s, or Nothing if ``other`` is Nothing."""
        require_container(other, 'other', OPTION_TYPES, 'an Option')
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def zip_with[U, R](self, other: Option[U], combiner: Callable[[T, U], R | None]) -> Option[R]:
        """Combine this value with ``other``'s through ``combiner``."""
        return map2(self, other, combiner)

    def to_result[E](self, error_if_none: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value)."""
        from fallible.result import Ok

        return Ok(self.value)

    def to_try(self, fault_supplier: Callable[[], BaseException]) -> Success[T]:  # noqa: ARG002
        """Convert to Try, returning Success(value) without calling the supplier."""
        from fallible.try_ import Success

        return Success(self.value)


@sealed
@final
@dataclass(slots=True, frozen=True)
class NothingType:
    """Absent variant of Option.

    All instances are equal. Use the ``Nothing`` constant; the library never
    returns any other instance, and copying or pickling preserves it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.get_or_else(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def __reduce__(self) -> str:
        return 'Nothing'

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NotFoundError: Always.
        """
        msg = 'No value present. Option is Nothing.'
        raise NotFoundError(msg, branch='value')

    def get_or_else[T](self, fallback: T) -> T:
        """Return the fallback."""
        return fallback

    def get_or_else_compute[T](self, supplier: Callable[[], T]) -> T:
        """Compute and return the fallback."""
        return supplier()

    def get_or_none(self) -> None:
        """Return None."""
        return None

    def get_or_throw(self, exception_supplier: Callable[[], BaseException]) -> NoReturn:
        """Raise the exception produced by ``exception_supplier``."""
        raise exception_supplier()

    def map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling ``f``."""
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling ``f``."""
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling the predicate."""
        return self

    def peek(self, action: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return self; the action only runs on Some."""
        return self

    def peek_none(self, action: Callable[[], Any]) -> NothingType:
        """Call ``action()`` and return self."""
        action()
        return self

    def fold[R](self, on_none: Callable[[], R], on_some: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Return ``on_none()``."""
        return on_none()

    def match(self, on_none: Callable[[], Any], on_some: Callable[[Any], Any]) -> None:  # noqa: ARG002
        """Call ``on_none()`` for its side effect."""
        on_none()

    def zip(self, other: Option[Any]) -> NothingType:
        """Return Nothing."""
        require_container(other, 'other', OPTION_TYPES, 'an Option')
        return self

    def zip_with(self, other: Option[Any], combiner: Callable[[Any, Any], Any]) -> NothingType:
        """Return Nothing without calling ``combiner``."""
        return map2(self, other, combiner)

    def to_result[E](self, error_if_none: E) -> Err[E]:
        """Convert to Result, returning Err(error_if_none)."""
        from fallible.result import Err

        return Err(error_if_none)

    def to_try(self, fault_supplier: Callable[[], BaseException]) -> Failure[Any]:
        """Convert to Try, returning Failure of the supplied exception."""
        from fallible.try_ import Failure

        return Failure(fault_supplier())


Nothing: NothingType = NothingType()
"""The absent Option."""

type Option[T] = Some[T] | NothingType

OPTION_TYPES = (Some, NothingType)


# ---------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------


def some[T](value: T | None) -> Option[T]:
    """Wrap ``value`` in Some, or return Nothing if it is None."""
    if value is None:
        return Nothing
    return Some(value)


def none() -> NothingType:
    """Return Nothing."""
    return Nothing


def of_nullable[T](value: T | None) -> Option[T]:
    """Same as ``some``."""
    return some(value)


# ---------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------


def _element(option: Any) -> Option[Any]:
    if option is None:
        msg = 'options contains a None element (use Nothing instead)'
        raise ArgumentError(msg)
    return require_container(option, 'options element', OPTION_TYPES, 'an Option')


def sequence[T](options: Iterable[Option[T]]) -> Option[tuple[T, ...]]:
    """Turn an iterable of Options into an Option of a tuple.

    Elements are pulled one at a time; iteration stops at the first Nothing.

    Args:
        options: Options to collect. May be a one-shot iterator.

    Returns:
        Some of a tuple with every value in order, or Nothing if any element is Nothing.

    Raises:
        ArgumentError: If ``options`` is None, or an element before the first
            Nothing is None or not an Option.
    """
    require(options, 'options')
    values: list[T] = []
    for option in options:
        if isinstance(_element(option), NothingType):
            return Nothing
        values.append(option.value)
    return Some(tuple(values))


def traverse[A, B](values: Iterable[A], mapper: Callable[[A], Option[B]]) -> Option[tuple[B, ...]]:
    """Map each value to an Option and collect the results.

    ``mapper`` is not called again after it first returns Nothing, and no
    further values are pulled from ``values``.

    Args:
        values: Input values. May be a one-shot iterator.
        mapper: Function from a value to an Option.

    Returns:
        Some of a tuple with the mapped values in order, or Nothing.

    Raises:
        ArgumentError: If ``values`` or ``mapper`` is None, a value is None,
            or ``mapper`` returns None or a non-Option.
    """
    require(values, 'values')
    require(mapper, 'mapper')
    out: list[B] = []
    for value in values:
        if value is None:
            msg = 'values contains a None element'
            raise ArgumentError(msg)
        mapped = mapper(value)
        if mapped is None:
            msg = 'traverse mapper must not return None'
            raise ArgumentError(msg)
        require_container(mapped, 'traverse mapper result', OPTION_TYPES, 'an Option')
        if isinstance(mapped, NothingType):
            return Nothing
        out.append(mapped.value)
    return Some(tuple(out))


def collect_present[T](options: Iterable[Option[T]]) -> list[T]:
    """Return the values of every Some, skipping Nothing."""
    require(options, 'options')
    return [value for option in options for value in _element(option)]


def map2[A, B, R](a: Option[A], b: Option[B], combiner: Callable[[A, B], R | None]) -> Option[R]:
    """Combine two Options with ``combiner`` when both are present.

    Returns:
        ``of_nullable(combiner(a, b))``, or Nothing if either is Nothing.
    """
    require_container(a, 'a', OPTION_TYPES, 'an Option')
    require_container(b, 'b', OPTION_TYPES, 'an Option')
    require(combiner, 'combiner')
    if isinstance(a, Some) and isinstance(b, Some):
        return of_nullable(combiner(a.value, b.value))
    return Nothing


# ---------------------------------------------------------------------
# Interop
# ---------------------------------------------------------------------


def from_result[T](result: Result[T, Any]) -> Option[T]:
    """Ok(v) becomes ``of_nullable(v)``; Err becomes Nothing."""
    from fallible.result import RESULT_TYPES, Ok

    require_container(result, 'result', RESULT_TYPES, 'a Result')
    if isinstance(result, Ok):
        return of_nullable(result.value)
    return Nothing


def from_try[T](attempt: Try[T]) -> Option[T]:
    """Success(v) becomes ``of_nullable(v)``; Failure becomes Nothing."""
    from fallible.try_ import TRY_TYPES, Success

    require_container(attempt, 'attempt', TRY_TYPES, 'a Try')
    if isinstance(attempt, Success):
        return of_nullable(attempt.value)
    return Nothing


def to_result[T, E](option: Option[T], error_if_none: E) -> Result[T, E]:
    """Module form of ``Option.to_result``."""
    require_container(option, 'option', OPTION_TYPES, 'an Option')
    return option.to_result(error_if_none)


def to_try[T](option: Option[T], fault_supplier: Callable[[], BaseException]) -> Try[T]:
    """Module form of ``Option.to_try``; the supplier runs only for Nothing."""
    require_container(option, 'option', OPTION_TYPES, 'an Option')
    require(fault_supplier, 'fault_supplier')
    return option.to_try(fault_supplier)
