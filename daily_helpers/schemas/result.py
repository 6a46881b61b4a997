# ==============================================================================
# RESULT ENVELOPE - Operation Outcome Wrapper
# ==============================================================================
# Immutable success/failure/message/status value returned by API handlers
# and translated into an HTTP response by daily_helpers.api.responses.
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


def strip_line_breaks(message: Optional[str]) -> str:
    """Remove every carriage return and line feed; None becomes ""."""
    if not message:
        return ""
    return message.replace("\r", "").replace("\n", "")


class ResultEnvelope(BaseModel, Generic[T]):
    """
    Outcome of an operation: success flag, message, payload and status code.

    Instances are frozen. Build them through the named constructors
    ``success`` and ``failure``; the payload type is the generic parameter
    (``ResultEnvelope[OrderResponse]``) and defaults to any JSON-serializable
    value.

    Attributes:
        succeeded: Whether the operation succeeded
        message: Status message (line breaks removed on failure)
        payload: Optional response content
        status_code: HTTP status code, or None when a failure left it unset

    Example:
        >>> result = ResultEnvelope.failure("Order\\r\\nmissing", None, 404)
        >>> result.message, result.status_code
        ('Ordermissing', 404)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    succeeded: bool = Field(
        ...,
        description="Whether the operation succeeded"
    )
    message: str = Field(
        "",
        description="Status message"
    )
    payload: Optional[T] = Field(
        None,
        description="Response content"
    )
    status_code: Optional[int] = Field(
        None,
        description="HTTP status code"
    )

    @classmethod
    def success(
        cls,
        message: Optional[str] = "",
        payload: Optional[T] = None,
    ) -> "ResultEnvelope[T]":
        """Create a successful result with status 200."""
        return cls(
            succeeded=True,
            message=message or "",
            payload=payload,
            status_code=status.HTTP_200_OK,
        )

    @classmethod
    def failure(
        cls,
        message: Optional[str],
        payload: Optional[T] = None,
        status_code: Optional[int] = None,
    ) -> "ResultEnvelope[T]":
        """
        Create a failed result.

        Without ``status_code`` the code stays unset (None); the transport
        step falls back to 500 via ``effective_status_code``.
        """
        return cls(
            succeeded=False,
            message=strip_line_breaks(message),
            payload=payload,
            status_code=int(status_code) if status_code is not None else None,
        )

    @property
    def effective_status_code(self) -> int:
        if self.status_code is None:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        return self.status_code

    def to_body(self) -> Dict[str, Any]:
        """Transport body: success flag, message and content."""
        return {
            "success": self.succeeded,
            "message": self.message,
            "content": self.payload,
        }
