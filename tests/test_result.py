# ==============================================================================
# RESULT ENVELOPE TESTS
# ==============================================================================

import json
from typing import List

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from daily_helpers.api.responses import to_response
from daily_helpers.schemas.result import ResultEnvelope, strip_line_breaks


class OrderLine(BaseModel):
    sku: str
    quantity: int


class TestSuccess:
    """Tests for ResultEnvelope.success."""

    @pytest.mark.parametrize("message", ["Saved", "", None])
    @pytest.mark.parametrize("payload", [None, {"id": 5}, [1, 2], "text", 0])
    def test_success_is_ok(self, message, payload):
        """Test success always yields succeeded and 200."""
        result = ResultEnvelope.success(message, payload)

        assert result.succeeded is True
        assert result.status_code == 200
        assert result.message == (message or "")
        assert result.payload == payload

    def test_success_keeps_line_breaks(self):
        """Test only failures strip line breaks."""
        assert ResultEnvelope.success("a\r\nb").message == "a\r\nb"


class TestFailure:
    """Tests for ResultEnvelope.failure."""

    def test_failure_with_code(self):
        """Test CR/LF are stripped and the status code is kept."""
        result = ResultEnvelope.failure("a\r\nb", {"id": 1}, 404)

        assert result.succeeded is False
        assert result.message == "ab"
        assert result.payload == {"id": 1}
        assert result.status_code == 404

    def test_failure_without_code(self):
        """Test the no-code variant leaves status unset."""
        result = ResultEnvelope.failure("Line one\nLine two", None)

        assert result.succeeded is False
        assert result.message == "Line oneLine two"
        assert result.status_code is None
        assert result.effective_status_code == 500

    def test_failure_with_none_message(self):
        """Test a None message is treated as empty text."""
        assert ResultEnvelope.failure(None, None, 400).message == ""

    def test_strip_line_breaks(self):
        """Test every carriage return and line feed is removed."""
        assert strip_line_breaks("\r\na\rb\nc\r\n") == "abc"
        assert strip_line_breaks(None) == ""


class TestImmutability:
    """Tests that envelopes cannot be changed after construction."""

    def test_fields_are_frozen(self):
        """Test assignment raises."""
        result = ResultEnvelope.success("Saved", {"id": 1})

        with pytest.raises(PydanticValidationError):
            result.succeeded = False
        with pytest.raises(PydanticValidationError):
            result.status_code = 500


class TestTypedPayload:
    """Tests for parametrized payloads."""

    def test_payload_validated_against_type(self):
        """Test ResultEnvelope[List[OrderLine]] validates its payload."""
        result = ResultEnvelope[List[OrderLine]].success(
            "Loaded", [{"sku": "A-1", "quantity": 2}]
        )

        assert result.payload == [OrderLine(sku="A-1", quantity=2)]

    def test_payload_type_mismatch(self):
        """Test an invalid payload is rejected."""
        with pytest.raises(PydanticValidationError):
            ResultEnvelope[int].success("Count", "not a number")


class TestTransportTranslation:
    """Tests for to_response and to_body."""

    def test_body_shape(self):
        """Test the body exposes success, message and content."""
        body = ResultEnvelope.failure("Nope", [1], 409).to_body()
        assert body == {"success": False, "message": "Nope", "content": [1]}

    def test_json_response(self):
        """Test status line and JSON body of the response."""
        response = to_response(
            ResultEnvelope.success("Loaded", OrderLine(sku="A-1", quantity=3))
        )

        assert response.status_code == 200
        assert json.loads(response.body) == {
            "success": True,
            "message": "Loaded",
            "content": {"sku": "A-1", "quantity": 3},
        }

    def test_unset_status_defaults_to_500(self):
        """Test a failure without status code is sent as 500."""
        response = to_response(ResultEnvelope.failure("Unknown", None))
        assert response.status_code == 500
