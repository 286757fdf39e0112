"""Exception hierarchy for resultant.

Failures travel as values inside ``Failure``; the exceptions here cover the
library's own misuse signals and the stock convertible error.
"""

from __future__ import annotations

from typing import Self


class ResultantError(Exception):
    """Base exception for all resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(ResultantError):
    """Settings validation or resolution failed."""


class ContractViolationError(ResultantError):
    """A caller-supplied callable broke the result contract.

    Raised only when strict contract checking is enabled.
    """

    def __init__(
        self, message: str, *, operation: str | None = None, hint: str | None = None
    ) -> None:
        self.operation = operation
        msg = message if operation is None else f"[{operation}] {message}"
        super().__init__(msg, hint=hint)


class AnyError(ResultantError):
    """Convertible error that absorbs any exception.

    The absorbed exception is available as ``error`` and chained as
    ``__cause__`` so tracebacks stay intact.
    """

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"{type(error).__name__}: {error}")
        self.__cause__ = error

    @classmethod
    def from_any(cls, error: Exception) -> Self:
        """Wrap *error*, or return it unchanged if it already is this type."""
        if isinstance(error, cls):
            return error
        return cls(error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyError):
            return NotImplemented
        return self.error is other.error

    def __hash__(self) -> int:
        return hash(id(self.error))
