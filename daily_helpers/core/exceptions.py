# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling.
# Each exception also derives from the builtin error kind it expresses, so
# the exception classifier maps it to the matching HTTP status code.
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception for all package errors.

    Provides a consistent interface for error handling with:
    - Error code for programmatic identification
    - HTTP status code for errors the classifier table does not cover
    - Detailed message and optional context

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        status_code: Response status used when no classifier row matches
        details: Additional context dictionary

    Example:
        >>> raise AppException(
        ...     message="Something went wrong",
        ...     error_code="INTERNAL_ERROR",
        ...     status_code=500
        ... )
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class NotFoundError(AppException, LookupError):
    """
    Raised when a requested resource does not exist.

    Maps to HTTP 404 Not Found.

    Attributes:
        resource_type: Type of resource that was not found
        resource_id: Identifier of the missing resource
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(AppException):
    """
    Raised when a data-store update collides with the stored state.

    Maps to HTTP 409 Conflict.
    """

    def __init__(
        self,
        message: str = "Resource update conflict",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="CONFLICT",
            status_code=409,
            details=details,
        )


# ==============================================================================
# VALIDATION EXCEPTIONS
# ==============================================================================

class ValidationError(AppException, ValueError):
    """
    Raised when input validation fails.

    Maps to HTTP 422 Unprocessable Entity.
    Contains field-level validation errors.
    """

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=422,
            details={"validation_errors": errors or {}},
        )
        self.errors = errors or {}


class InvalidOperationError(AppException, RuntimeError):
    """
    Raised when an operation is not valid for the object's current state.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str = "Operation is not valid in the current state",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_OPERATION",
            status_code=422,
            details=details,
        )


class InvalidArgumentError(AppException, ValueError):
    """
    Raised for malformed or out-of-range arguments.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_ARGUMENT",
            status_code=400,
            details={"argument": argument} if argument else None,
        )
        self.argument = argument


class ArgumentNullError(InvalidArgumentError):
    """Raised when a required argument is missing (None)."""

    def __init__(self, argument: str) -> None:
        super().__init__(
            message=f"Value cannot be null. Parameter: {argument}",
            argument=argument,
        )
        self.error_code = "ARGUMENT_NULL"


# ==============================================================================
# INFRASTRUCTURE EXCEPTIONS
# ==============================================================================

class ConfigurationError(AppException):
    """Raised when required configuration is missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=details,
        )


class ReportServerError(AppException):
    """
    Raised when the report server rejects a render request.

    Maps to HTTP 502 Bad Gateway.
    """

    def __init__(
        self,
        message: str = "Report server request failed",
        upstream_status: Optional[int] = None,
        report_path: Optional[str] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        if report_path:
            details["report_path"] = report_path

        super().__init__(
            message=message,
            error_code="REPORT_SERVER_ERROR",
            status_code=502,
            details=details,
        )
        self.upstream_status = upstream_status
        self.report_path = report_path
