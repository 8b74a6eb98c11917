"""Result type: Ok[T] | Err[E] for explicit, typed error handling.

Unlike Option, neither variant coalesces ``None``: ``Ok(None)`` and
``Err(None)`` are ordinary values. Mappers passed to Result operators are
expected not to raise; if they do, the exception propagates.

Example:
    ```python
    from fallible import err, ok

    ok(5).flat_map(lambda v: ok(v * 2)).flat_map(lambda v: err('odd')).get_error()  # 'odd'
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, final

from fallible._internal import require, require_container, sealed
from fallible.errors import ArgumentError, NotFoundError

if TYPE_CHECKING:
    from fallible.option import Option
    from fallible.try_ import Try

__all__ = [
    'Err',
    'Ok',
    'Result',
    'err',
    'from_option',
    'from_try',
    'ok',
    'partition',
    'sequence',
    'traverse',
]


@sealed
@final
@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).get()
        42
        >>> Ok(21).map(lambda x: x * 2)
        Ok(42)
    """

    value: T

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_error(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            NotFoundError: Always, with ``branch='error'``.
        """
        msg = 'No error present. This Result is Ok.'
        raise NotFoundError(msg, branch='error')

    def get_or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def get_or_else_compute(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def get_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_throw(self, exception_mapper: Callable[[Any], BaseException]) -> T:  # noqa: ARG002
        """Return the contained value without calling the mapper."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing ``f(value)``, even when that is None.
        """
        return Ok(f(self.value))

    def map_error(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by ``f``.

        Raises:
            ArgumentError: If ``f`` returns None or something that is not a Result.
        """
        return require_container(f(self.value), 'flat_map mapper result', RESULT_TYPES, 'a Result')

    def filter[E](self, predicate: Callable[[T], bool], error_if_false: E) -> Result[T, E]:
        """Keep self if the predicate holds, else Err(error_if_false)."""
        if predicate(self.value):
            return self
        return Err(error_if_false)

    def filter_or_else[E](self, predicate: Callable[[T], bool], error_fn: Callable[[T], E]) -> Result[T, E]:
        """Keep self if the predicate holds, else Err(error_fn(value)).

        ``error_fn`` is only called when the predicate fails.
        """
        if predicate(self.value):
            return self
        return Err(error_fn(self.value))

    def fold[R](self, on_ok: Callable[[T], R], on_err: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Return ``on_ok(value)``."""
        return on_ok(self.value)

    def match(self, on_ok: Callable[[T], Any], on_err: Callable[[Any], Any]) -> None:  # noqa: ARG002
        """Call ``on_ok(value)`` for its side effect."""
        on_ok(self.value)

    def peek(self, action: Callable[[T], Any]) -> Ok[T]:
        """Call ``action`` with the value and return self."""
        action(self.value)
        return self

    def peek_error(self, action: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self; the action only runs on Err."""
        return self

    def to_option(self) -> Option[T]:
        """Convert to Option; an Ok holding None becomes Nothing."""
        from fallible.option import of_nullable

        return of_nullable(self.value)

    def to_try(self, fault_mapper: Callable[[Any], BaseException]) -> Try[T]:  # noqa: ARG002
        """Convert to Try, returning Success(value) without calling the mapper."""
        from fallible.try_ import Success

        return Success(self.value)


@sealed
@final
@dataclass(slots=True, frozen=True)
class Err[E]:
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('boom').is_err()
        True
        >>> Err('boom').get_or_else(0)
        0
    """

    error: E

    def __repr__(self) -> str:
        return f'Err({self.error!r})'

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def get(self) -> NoReturn:
        """Raise since Err carries no value.

        Raises:
            NotFoundError: Always, with ``branch='value'``.
        """
        msg = 'No value present. This Result is an Err.'
        raise NotFoundError(msg, branch='value')

    def get_error(self) -> E:
        """Return the contained error."""
        return self.error

    def get_or_else[T](self, fallback: T) -> T:
        """Return the fallback."""
        return fallback

    def get_or_else_compute[T](self, supplier: Callable[[], T]) -> T:
        """Compute and return the fallback."""
        return supplier()

    def get_or_none(self) -> None:
        """Return None."""
        return None

    def get_or_throw(self, exception_mapper: Callable[[E], BaseException]) -> NoReturn:
        """Raise ``exception_mapper(error)``."""
        raise exception_mapper(self.error)

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def flat_map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def filter(self, predicate: Callable[[Any], bool], error_if_false: Any) -> Err[E]:  # noqa: ARG002
        """Return self without calling the predicate."""
        return self

    def filter_or_else(self, predicate: Callable[[Any], bool], error_fn: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self without calling the predicate."""
        return self

    def fold[R](self, on_ok: Callable[[Any], R], on_err: Callable[[E], R]) -> R:  # noqa: ARG002
        """Return ``on_err(error)``."""
        return on_err(self.error)

    def match(self, on_ok: Callable[[Any], Any], on_err: Callable[[E], Any]) -> None:  # noqa: ARG002
        """Call ``on_err(error)`` for its side effect."""
        on_err(self.error)

    def peek(self, action: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self; the action only runs on Ok."""
        return self

    def peek_error(self, action: Callable[[E], Any]) -> Err[E]:
        """Call ``action`` with the error and return self."""
        action(self.error)
        return self

    def to_option(self) -> Option[Any]:
        """Convert to Option, dropping the error."""
        from fallible.option import Nothing

        return Nothing

    def to_try(self, fault_mapper: Callable[[E], BaseException]) -> Try[Any]:
        """Convert to Try, returning Failure(fault_mapper(error))."""
        from fallible.try_ import Failure

        return Failure(fault_mapper(self.error))


type Result[T, E] = Ok[T] | Err[E]

RESULT_TYPES = (Ok, Err)


def ok[T](value: T) -> Ok[T]:
    """Wrap ``value`` in Ok."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap ``error`` in Err."""
    return Err(error)


def from_try[T](attempt: Try[T]) -> Result[T, BaseException]:
    """Success(v) becomes Ok(v); Failure(c) becomes Err(c)."""
    from fallible.try_ import TRY_TYPES

    require_container(attempt, 'attempt', TRY_TYPES, 'a Try')
    return attempt.to_result()


def from_option[T, E](option: Option[T], error_if_none: E) -> Result[T, E]:
    """Some(v) becomes Ok(v); Nothing becomes Err(error_if_none)."""
    from fallible.option import OPTION_TYPES

    require_container(option, 'option', OPTION_TYPES, 'an Option')
    return option.to_result(error_if_none)


def _element(result: Any) -> Result[Any, Any]:
    if result is None:
        msg = 'results contains a None element'
        raise ArgumentError(msg)
    return require_container(result, 'results element', RESULT_TYPES, 'a Result')


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[tuple[T, ...], E]:
    """Collect an iterable of Results into a Result of tuple.

    Short-circuits on the first Err encountered, which is returned as-is.

    Args:
        results: Results to collect. May be a one-shot iterator.

    Returns:
        Ok(tuple[T, ...]) if every element is Ok, otherwise the first Err.

    Examples:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok((1, 2, 3))
        >>> sequence([Ok(1), Err('fail'), Ok(3)])
        Err('fail')
    """
    require(results, 'results')
    values: list[T] = []
    for result in results:
        if isinstance(_element(result), Err):
            return result
        values.append(result.value)
    return Ok(tuple(values))


def traverse[A, T, E](values: Iterable[A], mapper: Callable[[A], Result[T, E]]) -> Result[tuple[T, ...], E]:
    """Map each value to a Result and collect, stopping at the first Err.

    Args:
        values: Input values. May be a one-shot iterator.
        mapper: Function from a value to a Result.

    Returns:
        Ok of a tuple with the mapped values in order, or the first Err.
    """
    require(values, 'values')
    require(mapper, 'mapper')
    out: list[T] = []
    for value in values:
        if value is None:
            msg = 'values contains a None element'
            raise ArgumentError(msg)
        mapped = mapper(value)
        if mapped is None:
            msg = 'traverse mapper must not return None'
            raise ArgumentError(msg)
        if isinstance(require_container(mapped, 'traverse mapper result', RESULT_TYPES, 'a Result'), Err):
            return mapped
        out.append(mapped.value)
    return Ok(tuple(out))


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate an iterable of Results into values and errors.

    Returns:
        tuple[list[T], list[E]]: A tuple of (values, errors), each in input order.
    """
    require(results, 'results')
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(_element(result), Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors
