"""resultant: success/failure values with a small combinator algebra.

Public API:
    - Success / Failure / Result: the canonical two-variant container
    - ResultType / ConvertibleError: capability protocols
    - map_value, flat_map, map_error, flat_map_error, try_map, combine: combinators
    - AnyError: stock ConvertibleError absorbing any exception
    - Settings / settings_scope: optional strict checks and diagnostics
"""

from __future__ import annotations

import logging

from resultant.combinators import (
    attempt,
    combine,
    convert,
    flat_map,
    flat_map_error,
    from_optional,
    map_error,
    map_value,
    recover,
    recover_with,
    try_map,
)
from resultant.config import (
    Settings,
    current_settings,
    resolve_settings,
    settings_scope,
)
from resultant.contract import (
    ConvertibleError,
    ResultType,
    error_of,
    is_failure,
    is_success,
    value_of,
)
from resultant.errors import (
    AnyError,
    ConfigurationError,
    ContractViolationError,
    ResultantError,
)
from resultant.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Variants
    "Success",
    "Failure",
    "Result",
    # Capabilities
    "ResultType",
    "ConvertibleError",
    "value_of",
    "error_of",
    "is_success",
    "is_failure",
    # Combinators
    "map_value",
    "flat_map",
    "map_error",
    "flat_map_error",
    "try_map",
    "combine",
    "recover",
    "recover_with",
    "attempt",
    "from_optional",
    "convert",
    # Errors
    "ResultantError",
    "AnyError",
    "ConfigurationError",
    "ContractViolationError",
    # Settings
    "Settings",
    "current_settings",
    "resolve_settings",
    "settings_scope",
]
