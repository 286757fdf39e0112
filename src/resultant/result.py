"""Canonical success/failure variants.

``Success`` and ``Failure`` are frozen, slotted dataclasses; ``Result`` is
their union. Every method is a thin delegate to ``resultant.combinators``,
which only relies on ``analyze``.

Example:
    ```python
    def parse_port(raw: str) -> Result[int, str]:
        return Success(raw).try_map(int).map_error(str).flat_map(
            lambda port: Success(port) if 0 < port < 65536 else Failure("out of range")
        )

    match parse_port("8080"):
        case Success(port):
            ...
        case Failure(reason):
            ...
    ```
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Never

from resultant.contract import is_failure, is_success

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultant.contract import ConvertibleError, ResultType


class _ResultOps[V, E]:
    """Combinator methods shared by both variants. Not a public base."""

    __slots__ = ()

    if TYPE_CHECKING:

        def analyze[U](
            self, on_success: Callable[[V], U], on_failure: Callable[[E], U]
        ) -> U: ...

    def is_success(self) -> bool:
        """Return True for ``Success``."""
        return is_success(self)

    def is_failure(self) -> bool:
        """Return True for ``Failure``."""
        return is_failure(self)

    def map[U](self, transform: Callable[[V], U]) -> Result[U, E]:
        """Transform the success value; failures pass through unchanged."""
        return _combinators.map_value(self, transform)

    def flat_map[U, E2](
        self, transform: Callable[[V], ResultType[U, E2]]
    ) -> ResultType[U, E | E2]:
        """Chain a result-returning step; failures short-circuit."""
        return _combinators.flat_map(self, transform)

    def map_error[E2](self, transform: Callable[[E], E2]) -> Result[V, E2]:
        """Transform the failure error; successes pass through unchanged."""
        return _combinators.map_error(self, transform)

    def flat_map_error[V2, E2](
        self, transform: Callable[[E], ResultType[V2, E2]]
    ) -> ResultType[V | V2, E2]:
        """Chain a result-returning step on the error channel."""
        return _combinators.flat_map_error(self, transform)

    def try_map[U, C: ConvertibleError](
        self,
        transform: Callable[[V], U],
        error_type: type[C] | None = None,
    ) -> Result[U, E | C]:
        """Like ``map``, but exceptions raised by *transform* become failures.

        See ``resultant.combinators.try_map``.
        """
        return _combinators.try_map(self, transform, error_type)

    def combine[R, E2](
        self, right: Callable[[], ResultType[R, E2]]
    ) -> Result[tuple[V, R], E | E2]:
        """Pair this value with ``right()``'s; ``right`` is skipped on failure."""
        return _combinators.combine(self, right)

    def recover[D](self, default: D) -> V | D:
        """Return the success value, or *default* for a failure."""
        return _combinators.recover(self, default)

    def recover_with[V2, E2](
        self, fallback: ResultType[V2, E2]
    ) -> ResultType[V, E] | ResultType[V2, E2]:
        """Return this result if it succeeded, otherwise *fallback*."""
        return _combinators.recover_with(self, fallback)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[V](_ResultOps[V, Never]):
    """A successful outcome carrying ``value``."""

    __match_args__ = ("value",)

    value: V

    @property
    def error(self) -> None:
        """Always ``None``; a success has no error."""
        return None

    @classmethod
    def from_value(cls, value: V) -> Success[V]:
        """Construct a ``Success``."""
        return Success(value)

    @classmethod
    def from_error[E](cls, error: E) -> Failure[E]:
        """Construct a ``Failure``."""
        return Failure(error)

    def analyze[U](
        self, on_success: Callable[[V], U], on_failure: Callable[[Any], U]
    ) -> U:
        """Return ``on_success(self.value)``; ``on_failure`` is never called."""
        return on_success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E](_ResultOps[Never, E]):
    """A failed outcome carrying ``error``."""

    __match_args__ = ("error",)

    error: E

    @property
    def value(self) -> None:
        """Always ``None``; a failure has no value."""
        return None

    @classmethod
    def from_value[V](cls, value: V) -> Success[V]:
        """Construct a ``Success``."""
        return Success(value)

    @classmethod
    def from_error(cls, error: E) -> Failure[E]:
        """Construct a ``Failure``."""
        return Failure(error)

    def analyze[U](
        self, on_success: Callable[[Any], U], on_failure: Callable[[E], U]
    ) -> U:
        """Return ``on_failure(self.error)``; ``on_success`` is never called."""
        return on_failure(self.error)


type Result[V, E] = Success[V] | Failure[E]


# Imported last: combinators builds Success/Failure defined above.
from resultant import combinators as _combinators  # noqa: E402

__all__ = ("Failure", "Result", "Success")
