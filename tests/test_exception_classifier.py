# ==============================================================================
# EXCEPTION CLASSIFIER TESTS
# ==============================================================================
# Status table, user message and log message composition
# ==============================================================================

import asyncio
import concurrent.futures
import json

import httpx
import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from daily_helpers.core.exceptions import (
    ArgumentNullError,
    ConfigurationError,
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ReportServerError,
    ValidationError,
)
from daily_helpers.services.exception_classifier import (
    UNEXPECTED_ERROR_PREFIX,
    ClassifiedError,
    base_exception,
    classify_exception,
    status_code_for,
)


class _Quantity(BaseModel):
    amount: int


def _pydantic_error() -> PydanticValidationError:
    try:
        _Quantity(amount="many")
    except PydanticValidationError as exc:
        return exc
    raise AssertionError("expected a validation error")


def _raised(exc: BaseException) -> BaseException:
    """Raise and catch ``exc`` so it carries a traceback."""
    try:
        raise exc
    except BaseException as caught:
        return caught


class TestStatusTable:
    """Tests for the exception kind -> status code table."""

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (KeyError("sku"), 404),
            (IndexError("list index out of range"), 500),
            (LookupError("unknown encoding: nope"), 500),
            (NotFoundError("Order not found"), 404),
            (InvalidOperationError("Order already shipped"), 422),
            (ValidationError("Invalid order"), 422),
            (_pydantic_error(), 422),
            (IntegrityError("INSERT", {}, Exception("duplicate key")), 409),
            (StaleDataError("row changed"), 409),
            (ConflictError("Version mismatch"), 409),
            (ArgumentNullError("order_id"), 400),
            (ValueError("bad format"), 400),
            (json.JSONDecodeError("Expecting value", "x", 0), 400),
            (TimeoutError("took too long"), 408),
            (asyncio.TimeoutError(), 408),
            (concurrent.futures.TimeoutError(), 408),
            (asyncio.CancelledError(), 408),
            (concurrent.futures.CancelledError(), 408),
            (httpx.ReadTimeout("read timed out"), 408),
            (NotImplementedError("later"), 501),
            (ReportServerError("down", upstream_status=503), 502),
            (ConfigurationError("missing key"), 500),
            (RuntimeError("boom"), 500),
            (ZeroDivisionError("division by zero"), 500),
            (Exception(), 500),
        ],
    )
    def test_status_code_for_kind(self, exc, expected):
        """Test every table row and the 500 fallback."""
        assert status_code_for(exc) == expected
        assert classify_exception(exc, "/any").status_code == expected

    def test_validation_error_wins_over_value_error(self):
        """Test pydantic errors (a ValueError subclass) map to 422, not 400."""
        exc = _pydantic_error()
        assert isinstance(exc, ValueError)
        assert status_code_for(exc) == 422

    @pytest.mark.asyncio
    async def test_wait_for_timeout(self):
        """Test an asyncio.wait_for timeout maps to 408."""
        with pytest.raises(asyncio.TimeoutError) as exc_info:
            await asyncio.wait_for(asyncio.sleep(1), timeout=0.01)

        assert status_code_for(exc_info.value) == 408

    def test_app_exception_status_does_not_override_table(self):
        """Test a package error matched by the table keeps the table's code."""
        exc = ArgumentNullError("order_id")
        exc.status_code = 418
        assert status_code_for(exc) == 400


class TestUserMessage:
    """Tests for the user-facing message."""

    def test_not_found_scenario(self):
        """Test not-found error at /orders/5 yields 404 with endpoint and details."""
        result = classify_exception(NotFoundError("Item missing"), "/orders/5")

        assert result.status_code == 404
        assert "/orders/5" in result.user_message
        assert "Item missing" in result.user_message

    def test_message_layout(self):
        """Test the fixed prefix, endpoint and kind segments."""
        result = classify_exception(KeyError("sku"), "/products")

        assert result.user_message == (
            f"{UNEXPECTED_ERROR_PREFIX} Endpoint: /products."
            " Exception kind: KeyError. Details: 'sku'"
        )

    def test_empty_message_has_no_details(self):
        """Test Details segment is omitted when the message is empty."""
        result = classify_exception(TimeoutError(), "/slow")

        assert "Exception kind: TimeoutError." in result.user_message
        assert "Details: " not in result.user_message

    def test_inner_exception_from_cause(self):
        """Test explicit causes appear as the inner exception."""
        try:
            try:
                int("abc")
            except ValueError as inner:
                raise RuntimeError("Import failed") from inner
        except RuntimeError as exc:
            result = classify_exception(exc, "/imports")

        assert "Details: Import failed" in result.user_message
        assert "Inner Exception: invalid literal for int()" in result.user_message

    def test_suppressed_context_is_ignored(self):
        """Test ``raise ... from None`` hides the implicit context."""
        try:
            try:
                {}["missing"]
            except KeyError:
                raise ValueError("Bad key") from None
        except ValueError as exc:
            result = classify_exception(exc, "/keys")

        assert "Inner Exception" not in result.user_message
        assert "Base Exception" not in result.log_message


class TestLogMessage:
    """Tests for the log message."""

    def test_starts_with_user_message(self):
        """Test log message always begins with the user message."""
        result = classify_exception(_raised(ValueError("bad")), "/x")
        assert result.log_message.startswith(result.user_message)

    def test_stack_trace_only_when_raised(self):
        """Test Stack Trace appears iff the exception carries a traceback."""
        raised = classify_exception(_raised(ValueError("bad")), "/x")
        never_raised = classify_exception(ValueError("bad"), "/x")

        assert "Stack Trace:" in raised.log_message
        assert "Stack Trace:" not in never_raised.log_message
        assert never_raised.log_message == never_raised.user_message

    def test_base_exception_is_deepest_cause(self):
        """Test the deepest error of a three-level chain is reported."""
        root = KeyError("root cause")
        middle = ValueError("middle")
        middle.__cause__ = root
        top = RuntimeError("top")
        top.__cause__ = middle

        result = classify_exception(top, "/chain")

        assert base_exception(top) is root
        assert result.log_message.endswith("Base Exception: 'root cause'")
        assert "Inner Exception: middle" in result.user_message

    def test_cyclic_chain_terminates(self):
        """Test a cause cycle does not loop forever."""
        first = ValueError("first")
        second = ValueError("second")
        first.__cause__ = second
        second.__cause__ = first

        assert base_exception(first) is second
        assert classify_exception(first, "/cycle").status_code == 400


class TestClassifiedError:
    """Tests for the result tuple."""

    def test_unpacks_as_tuple(self):
        """Test result unpacks into (user, log, status)."""
        user_message, log_message, status_code = classify_exception(
            NotImplementedError("todo"), "/reports"
        )

        assert isinstance(classify_exception(NotImplementedError(), "/"), ClassifiedError)
        assert status_code == 501
        assert log_message.startswith(user_message)
