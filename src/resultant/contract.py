"""Capability contract for success/failure containers.

Any class that supplies ``from_value``, ``from_error`` and ``analyze`` is a
result as far as this library is concerned. Nothing needs to subclass
anything: the accessors below and every function in
``resultant.combinators`` are written against ``analyze`` alone.

Example:
    ```python
    class Checked:
        def __init__(self, ok, payload):
            self._ok, self._payload = ok, payload

        @classmethod
        def from_value(cls, value):
            return cls(True, value)

        @classmethod
        def from_error(cls, error):
            return cls(False, error)

        def analyze(self, on_success, on_failure):
            return on_success(self._payload) if self._ok else on_failure(self._payload)

    value_of(Checked.from_value(3))  # 3
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class ResultType[V, E](Protocol):
    """Protocol for a two-variant success/failure container."""

    @classmethod
    def from_value(cls, value: V) -> ResultType[V, E]:
        """Construct a success wrapping *value*."""
        ...

    @classmethod
    def from_error(cls, error: E) -> ResultType[V, E]:
        """Construct a failure wrapping *error*."""
        ...

    def analyze[U](
        self, on_success: Callable[[V], U], on_failure: Callable[[E], U]
    ) -> U:
        """Case analysis.

        Calls exactly one of the two functions, exactly once, with the payload
        of the active variant, and returns its result unmodified.
        """
        ...


@runtime_checkable
class ConvertibleError(Protocol):
    """Error types that can absorb an arbitrary raised exception.

    Required only by ``try_map``, which uses ``from_any`` to normalize
    whatever the transform raised into the result's error type.
    """

    @classmethod
    def from_any(cls, error: Exception) -> Self:
        """Return an instance of this error type representing *error*."""
        ...


def value_of[V, E](result: ResultType[V, E]) -> V | None:
    """Return the success value, or ``None`` for a failure."""
    return result.analyze(lambda value: value, lambda _: None)


def error_of[V, E](result: ResultType[V, E]) -> E | None:
    """Return the failure error, or ``None`` for a success."""
    return result.analyze(lambda _: None, lambda error: error)


def is_success(result: ResultType[object, object]) -> bool:
    """Return True if *result* is in the success state."""
    return result.analyze(lambda _: True, lambda _: False)


def is_failure(result: ResultType[object, object]) -> bool:
    """Return True if *result* is in the failure state."""
    return result.analyze(lambda _: False, lambda _: True)


__all__ = (
    "ConvertibleError",
    "ResultType",
    "error_of",
    "is_failure",
    "is_success",
    "value_of",
)
