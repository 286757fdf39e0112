"""Pytest configuration and fixtures.

Provides environment isolation and shared test doubles. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Self

import pytest

from resultant.config import ENV_PREFIX

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass(frozen=True)
class ParseError:
    """Plain (non-exception) error type opting into ConvertibleError."""

    message: str

    @classmethod
    def from_any(cls, error: Exception) -> Self:
        return cls(f"{type(error).__name__}: {error}")


class Tagged:
    """Hand-written conforming result type that shares no base with the library."""

    def __init__(self, ok: bool, payload: Any) -> None:
        self.ok = ok
        self.payload = payload

    @classmethod
    def from_value(cls, value: Any) -> Tagged:
        return cls(True, value)

    @classmethod
    def from_error(cls, error: Any) -> Tagged:
        return cls(False, error)

    def analyze(self, on_success, on_failure):
        return on_success(self.payload) if self.ok else on_failure(self.payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tagged):
            return NotImplemented
        return (self.ok, self.payload) == (other.ok, other.payload)

    def __hash__(self) -> int:
        return hash((self.ok, self.payload))

    def __repr__(self) -> str:
        return f"Tagged(ok={self.ok!r}, payload={self.payload!r})"


@dataclass
class CallCounter:
    """Callable wrapper that records how often it ran."""

    func: Any
    calls: int = 0

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return self.func(*args)


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resultant_env(request, monkeypatch):
    """Clear RESULTANT_* variables so settings start from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def counter():
    """Factory for CallCounter instances."""
    return CallCounter
