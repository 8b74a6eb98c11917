"""Error types raised by the containers, and the Fault snapshot struct."""

from __future__ import annotations

import msgspec

__all__ = [
    'ArgumentError',
    'Fault',
    'FaultError',
    'NotFoundError',
    'PredicateError',
]


class ArgumentError(TypeError):
    """A caller passed ``None`` or a foreign object where a container was required."""


class NotFoundError(LookupError):
    """The accessed branch is not the active one.

    Attributes:
        branch: Which payload was missing: ``'value'``, ``'error'`` or ``'cause'``.
    """

    def __init__(self, message: str, branch: str = 'value') -> None:
        self.branch = branch
        super().__init__(message)


class PredicateError(ValueError):
    """Default fault for ``Try.filter`` when the predicate does not hold."""

    def __init__(self, message: str = 'Predicate does not hold for value') -> None:
        super().__init__(message)


class Fault(msgspec.Struct, frozen=True, gc=False):
    """Immutable description of a captured exception and its chain.

    The live exception stays on ``Failure.cause``; a Fault is what gets logged
    and rendered.

    Attributes:
        type_name: Class name, module-qualified unless it is a builtin.
        message: ``str()`` of the exception.
        cause: Snapshot of the explicit ``__cause__``, or of the implicit
            ``__context__`` when it is not suppressed.
    """

    type_name: str
    message: str
    cause: Fault | None = None

    @classmethod
    def of(cls, exc: BaseException) -> Fault:
        """Snapshot ``exc`` and everything it was chained from."""
        return _snapshot(exc, set())

    def to_exception(self) -> FaultError:
        """Convert to an exception for raise-based code."""
        return FaultError(self)


class FaultError(RuntimeError):
    """Generic runtime fault wrapping a cause outside the ``Exception`` family."""

    def __init__(self, fault: Fault | BaseException) -> None:
        self.fault = fault if isinstance(fault, Fault) else Fault.of(fault)
        super().__init__(f'{self.fault.type_name}: {self.fault.message}')

    def to_struct(self) -> Fault:
        """Convert to the struct form."""
        return self.fault


def _qualified_name(kind: type) -> str:
    if kind.__module__ == 'builtins':
        return kind.__qualname__
    return f'{kind.__module__}.{kind.__qualname__}'


def _snapshot(exc: BaseException, seen: set[int]) -> Fault:
    seen.add(id(exc))
    chained = exc.__cause__
    if chained is None and not exc.__suppress_context__:
        chained = exc.__context__
    cause = None
    if chained is not None and id(chained) not in seen:
        cause = _snapshot(chained, seen)
    return Fault(type_name=_qualified_name(type(exc)), message=str(exc), cause=cause)
