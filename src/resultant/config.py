"""Settings for resultant's optional runtime checks and diagnostics.

Settings are an explicit, in-process opt-in. Combinators only ever see the
ambient ``settings_scope`` value, or the defaults when no scope is active;
the process environment and ``.env`` files are read solely by an explicit
``resolve_settings`` call, whose result can then be handed to
``settings_scope``. Ambient overrides are held in a context variable so they
are thread- and task-local.

Variables understood by ``resolve_settings``:
    - ``RESULTANT_STRICT_CONTRACTS``: verify caller callbacks return results.
    - ``RESULTANT_LOG_CAPTURED_ERRORS``: log exceptions captured by ``try_map``.
    - ``RESULTANT_CAPTURE_LOG_LEVEL``: level used for those log records.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping
    from pathlib import Path

log = logging.getLogger(__name__)

ENV_PREFIX = "RESULTANT_"

_LEVEL_NAMES = frozenset(logging.getLevelNamesMapping())


class Settings(BaseModel):
    """Validated, immutable settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_contracts: bool = False
    log_captured_errors: bool = False
    capture_log_level: str = "DEBUG"

    @field_validator("capture_log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case, with surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("capture_log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Reject names the logging module does not know."""
        if v not in _LEVEL_NAMES:
            raise ValueError(f"unknown logging level {v!r}")
        return v

    @property
    def capture_levelno(self) -> int:
        """Numeric logging level for captured-error records."""
        return logging.getLevelNamesMapping()[self.capture_log_level]


_FIELDS = tuple(Settings.model_fields)


def _from_env_mapping(env: Mapping[str, str | None]) -> dict[str, str]:
    """Pick ``RESULTANT_*`` keys out of *env* and map them to field names."""
    picked: dict[str, str] = {}
    for name in _FIELDS:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            picked[name] = raw
    return picked


def _validate(data: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(data))
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigurationError(
            f"Invalid resultant settings: {fields or 'unknown field'}",
            hint=f"Check {ENV_PREFIX}* environment variables and overrides.",
        ) from e


def resolve_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> Settings:
    """Resolve settings from overrides, environment and an optional dotenv file.

    Args:
        overrides: Field values that take precedence over everything else.
        env: Environment mapping to read; defaults to ``os.environ``.
        dotenv_path: Optional ``.env`` file. It is read without modifying
            ``os.environ``.

    Raises:
        ConfigurationError: If any resolved value fails validation.
    """
    data: dict[str, Any] = {}
    if dotenv_path is not None:
        from_file = _from_env_mapping(dotenv_values(dotenv_path))
        log.debug("settings from %s: %s", dotenv_path, sorted(from_file))
        data.update(from_file)
    from_env = _from_env_mapping(os.environ if env is None else env)
    if from_env:
        log.debug("settings from environment: %s", sorted(from_env))
    data.update(from_env)
    data.update(overrides or {})
    return _validate(data)


# --- Ambient scope ---

_DEFAULTS = Settings()

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "resultant_settings", default=None
)


def current_settings() -> Settings:
    """Return the ambient settings, or the defaults outside any scope.

    Never consults the process environment and never raises.
    """
    ambient = _AMBIENT.get()
    return _DEFAULTS if ambient is None else ambient


@contextmanager
def settings_scope(
    settings: Settings | None = None, **overrides: Any
) -> Generator[Settings]:
    """Temporarily set the ambient settings.

    Either pass a ``Settings`` instance, or keyword overrides that are applied
    on top of the currently active settings. Overrides are validated here, on
    entry, so nothing inside the scope can fail on them.

    Example:
        with settings_scope(strict_contracts=True):
            result.flat_map(step)

        with settings_scope(resolve_settings(dotenv_path=".env")):
            ...
    """
    if settings is None:
        settings = _validate({**current_settings().model_dump(), **overrides})
    elif overrides:
        raise TypeError("Pass either a Settings instance or overrides, not both")
    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)


__all__ = (
    "ENV_PREFIX",
    "Settings",
    "current_settings",
    "resolve_settings",
    "settings_scope",
)
