"""Unit tests for try_map and the exception-to-value boundary."""

import logging

import pytest

from resultant import (
    AnyError,
    ContractViolationError,
    Failure,
    Success,
    settings_scope,
    try_map,
)
from tests.conftest import ParseError

pytestmark = pytest.mark.unit


def _raiser(exc):
    def transform(_value):
        raise exc

    return transform


class TestTryMap:
    def test_normal_return_becomes_success(self):
        assert try_map(Success("42"), int) == Success(42)

    def test_raised_error_is_converted_with_from_any(self):
        result = Success("x").try_map(int, ParseError)
        assert isinstance(result, Failure)
        assert isinstance(result.error, ParseError)
        assert result.error.message.startswith("ValueError:")

    def test_default_error_type_is_any_error(self):
        boom = KeyError("k")
        result = Success(1).try_map(_raiser(boom))
        assert result == Failure(AnyError(boom))
        assert result.error.__cause__ is boom

    def test_any_error_is_not_double_wrapped(self):
        inner = AnyError(ValueError("v"))
        result = Success(1).try_map(_raiser(inner))
        assert result.error is inner

    def test_original_failure_skips_transform(self, counter):
        transform = counter(lambda v: v)
        result = Failure(ParseError("earlier")).try_map(transform, ParseError)
        assert result == Failure(ParseError("earlier"))
        assert transform.calls == 0

    @pytest.mark.parametrize("exc", [KeyboardInterrupt(), SystemExit(2)])
    def test_base_exceptions_propagate(self, exc):
        with pytest.raises(type(exc)):
            Success(1).try_map(_raiser(exc))


class TestCaptureLogging:
    def test_silent_by_default(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="resultant"):
            Success(1).try_map(_raiser(ValueError("quiet")))
        assert caplog.records == []

    def test_logs_when_enabled(self, caplog):
        with (
            caplog.at_level(logging.DEBUG, logger="resultant"),
            settings_scope(log_captured_errors=True),
        ):
            Success(1).try_map(_raiser(ValueError("loud")))

        (record,) = caplog.records
        assert record.levelno == logging.DEBUG
        assert "ValueError" in record.getMessage()
        assert record.exc_info is not None

    def test_uses_configured_level(self, caplog):
        with (
            caplog.at_level(logging.DEBUG, logger="resultant"),
            settings_scope(log_captured_errors=True, capture_log_level="warning"),
        ):
            Success(1).try_map(_raiser(ValueError("warn")))

        assert [r.levelno for r in caplog.records] == [logging.WARNING]


class TestStrictContracts:
    def test_error_type_without_from_any_is_rejected(self):
        with (
            settings_scope(strict_contracts=True),
            pytest.raises(ContractViolationError, match=r"\[try_map\]"),
        ):
            Success(1).try_map(int, ValueError)

    def test_valid_error_type_accepted(self):
        with settings_scope(strict_contracts=True):
            assert Success("7").try_map(int, ParseError) == Success(7)
