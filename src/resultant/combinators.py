"""Combinators over any ``ResultType``.

Each function here is derived from ``analyze`` and accepts any conforming
container, not only ``Success``/``Failure``. Derived results are always the
canonical variants. Failures are forwarded unchanged: never dropped, never
merged, the earliest one wins.

``strict_contracts`` (see ``resultant.config``) is a debugging aid outside
the result contract. The contract itself, including the ``ConvertibleError``
bound on ``try_map``, is expressed through type annotations and enforced by
the type checker. Only inside an explicit ``settings_scope`` that enables it
are callbacks inspected at runtime and a ``ContractViolationError`` raised
when one does not return a result. Otherwise no runtime type inspection
takes place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resultant._boundary import capture
from resultant.config import current_settings
from resultant.contract import ResultType
from resultant.errors import AnyError, ContractViolationError
from resultant.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultant.contract import ConvertibleError
    from resultant.result import Result


def _checked[T](operation: str, produced: T) -> T:
    if current_settings().strict_contracts and not isinstance(produced, ResultType):
        raise ContractViolationError(
            f"callback returned {type(produced).__name__}, expected a result",
            operation=operation,
            hint="Wrap plain values in Success(...) or use map() instead.",
        )
    return produced


def map_value[V, E, U](
    result: ResultType[V, E], transform: Callable[[V], U]
) -> Result[U, E]:
    """Apply *transform* to a success value; re-wrap failures untouched."""
    return flat_map(result, lambda value: Success(transform(value)))


def flat_map[V, E, U, E2](
    result: ResultType[V, E], transform: Callable[[V], ResultType[U, E2]]
) -> ResultType[U, E | E2]:
    """Return ``transform(value)`` for a success; re-wrap failures untouched.

    This is the sequencing operator: a chain of ``flat_map`` calls stops at
    the first failure and never calls the remaining transforms.
    """
    return result.analyze(
        lambda value: _checked("flat_map", transform(value)),
        Failure,
    )


def map_error[V, E, E2](
    result: ResultType[V, E], transform: Callable[[E], E2]
) -> Result[V, E2]:
    """Apply *transform* to a failure error; re-wrap successes untouched."""
    return flat_map_error(result, lambda error: Failure(transform(error)))


def flat_map_error[V, E, V2, E2](
    result: ResultType[V, E], transform: Callable[[E], ResultType[V2, E2]]
) -> ResultType[V | V2, E2]:
    """Return ``transform(error)`` for a failure; re-wrap successes untouched."""
    return result.analyze(
        Success,
        lambda error: _checked("flat_map_error", transform(error)),
    )


def try_map[V, E, U, C: ConvertibleError](
    result: ResultType[V, E],
    transform: Callable[[V], U],
    error_type: type[C] | None = None,
) -> Result[U, E | C]:
    """Apply a transform that may raise.

    On success, a normal return from *transform* becomes ``Success``; an
    ``Exception`` it raises is converted with ``error_type.from_any`` into a
    ``Failure``. The original failure is re-wrapped untouched and *transform*
    is not called.

    Args:
        result: The result to transform.
        transform: Callable that may raise.
        error_type: A ``ConvertibleError`` type; defaults to ``AnyError``.
    """
    target: Any = AnyError if error_type is None else error_type
    return flat_map(result, lambda value: capture(transform, value, target))


def combine[L, R, E, E2](
    left: ResultType[L, E], right: Callable[[], ResultType[R, E2]]
) -> Result[tuple[L, R], E | E2]:
    """Pair the values of *left* and ``right()``.

    *left* is inspected first. If it is a failure it is returned and *right*
    is never called. Otherwise *right* is called exactly once; its failure is
    returned, or ``Success((left_value, right_value))``.
    """
    return flat_map(
        left,
        lambda lv: map_value(_checked("combine", right()), lambda rv: (lv, rv)),
    )


def recover[V, E, D](result: ResultType[V, E], default: D) -> V | D:
    """Return the success value, or *default* for a failure."""
    return result.analyze(lambda value: value, lambda _: default)


def recover_with[V, E, V2, E2](
    result: ResultType[V, E], fallback: ResultType[V2, E2]
) -> ResultType[V, E] | ResultType[V2, E2]:
    """Return *result* if it succeeded, otherwise *fallback*."""
    return result.analyze(lambda _: result, lambda _: fallback)


def attempt[U, C: ConvertibleError](
    func: Callable[[], U], error_type: type[C] | None = None
) -> Result[U, C]:
    """Call *func* and return its outcome as a result.

    Exceptions are captured exactly as ``try_map`` captures them.
    """
    return try_map(Success(None), lambda _: func(), error_type)


def from_optional[V, E](value: V | None, error: E) -> Result[V, E]:
    """Return ``Success(value)``, or ``Failure(error)`` when *value* is None."""
    if value is None:
        return Failure(error)
    return Success(value)


def convert[V, E, T: ResultType[Any, Any]](
    result: ResultType[V, E], into: type[T]
) -> T:
    """Re-wrap *result* as another conforming type."""
    return result.analyze(into.from_value, into.from_error)


__all__ = (
    "attempt",
    "combine",
    "convert",
    "flat_map",
    "flat_map_error",
    "from_optional",
    "map_error",
    "map_value",
    "recover",
    "recover_with",
    "try_map",
)
