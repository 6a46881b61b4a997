# ==============================================================================
# EXCEPTION HANDLERS - Classified Error Responses
# ==============================================================================
# Every unhandled exception is classified, logged and returned as a failed
# ResultEnvelope whose status code matches the exception kind.
# ==============================================================================

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from daily_helpers.api.responses import to_response
from daily_helpers.schemas.result import ResultEnvelope
from daily_helpers.services.exception_classifier import classify_exception
from daily_helpers.utils.validation import collect_field_errors

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request body / query validation failures."""
        classified = classify_exception(exc, request.url.path)
        logger.warning(
            classified.log_message,
            extra={"request_id": getattr(request.state, "request_id", None)},
        )

        errors = [
            {"field": field, "message": message}
            for field, message in collect_field_errors(exc)
        ]
        return to_response(
            ResultEnvelope.failure(classified.user_message, errors, classified.status_code)
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        classified = classify_exception(exc, request.url.path)
        logger.error(
            classified.log_message,
            extra={"request_id": getattr(request.state, "request_id", None)},
        )
        return to_response(
            ResultEnvelope.failure(classified.user_message, None, classified.status_code)
        )
