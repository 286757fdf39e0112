"""The exception-to-value boundary.

``capture`` is the only place in resultant that catches an exception. It runs
a transform and turns whatever it raised into the caller's error type via
``ConvertibleError.from_any``. Everything else in the library is effect-free.

The ``ConvertibleError`` requirement is a type-level bound. The ``from_any``
lookup done under ``strict_contracts`` is a debugging aid outside that
contract and is skipped unless a ``settings_scope`` turns it on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resultant.config import current_settings
from resultant.errors import ContractViolationError
from resultant.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultant.contract import ConvertibleError

log = logging.getLogger(__name__)


def capture[V, U, C: ConvertibleError](
    transform: Callable[[V], U], value: V, error_type: type[C]
) -> Success[U] | Failure[C]:
    """Run ``transform(value)`` and materialize its outcome.

    A normal return becomes ``Success``. Any ``Exception`` becomes
    ``Failure(error_type.from_any(exc))``. ``BaseException`` subclasses that
    are not ``Exception`` (``KeyboardInterrupt``, ``SystemExit``) propagate.
    """
    settings = current_settings()
    if settings.strict_contracts and not callable(
        getattr(error_type, "from_any", None)
    ):
        raise ContractViolationError(
            f"{error_type!r} does not implement from_any()",
            operation="try_map",
            hint="Pass an error type satisfying ConvertibleError, e.g. AnyError.",
        )
    try:
        produced = transform(value)
    except Exception as exc:
        if settings.log_captured_errors:
            log.log(
                settings.capture_levelno,
                "try_map captured %s: %s",
                type(exc).__name__,
                exc,
                exc_info=exc,
            )
        return Failure(error_type.from_any(exc))
    return Success(produced)
