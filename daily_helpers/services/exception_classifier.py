# =============================================================================
# EXCEPTION CLASSIFIER - Exception to HTTP Status Mapping
# =============================================================================
# Turns a caught exception into:
#
#   1. USER MESSAGE: endpoint, exception kind, details and inner exception.
#   2. LOG MESSAGE: the user message plus stack trace and base exception.
#   3. STATUS CODE: picked from an ordered table of exception kinds.
#
# Status Table (first match wins):
# --------------------------------
#   KeyError / NotFoundError                             -> 404
#   InvalidOperationError / validation errors            -> 422
#   IntegrityError / StaleDataError / ConflictError      -> 409
#   ValueError (null argument, malformed format)         -> 400
#   TimeoutError / cancellation                          -> 408
#   NotImplementedError                                  -> 501
#   other AppException                                   -> its status_code
#   anything else                                        -> 500
#
# =============================================================================

from __future__ import annotations

import asyncio
import concurrent.futures
import traceback
from http import HTTPStatus
from typing import NamedTuple, Optional, Tuple, Type

import httpx
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from daily_helpers.core.exceptions import (
    AppException,
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)

UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred."

# pydantic's ValidationError is a ValueError, so validation precedes bad request.
STATUS_TABLE: Tuple[Tuple[Tuple[Type[BaseException], ...], HTTPStatus], ...] = (
    (
        (KeyError, NotFoundError),
        HTTPStatus.NOT_FOUND,
    ),
    (
        (InvalidOperationError, ValidationError, PydanticValidationError, RequestValidationError),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    ),
    (
        (IntegrityError, StaleDataError, ConflictError),
        HTTPStatus.CONFLICT,
    ),
    (
        (ValueError,),
        HTTPStatus.BAD_REQUEST,
    ),
    (
        (
            TimeoutError,
            asyncio.TimeoutError,
            concurrent.futures.TimeoutError,
            asyncio.CancelledError,
            concurrent.futures.CancelledError,
            httpx.TimeoutException,
        ),
        HTTPStatus.REQUEST_TIMEOUT,
    ),
    (
        (NotImplementedError,),
        HTTPStatus.NOT_IMPLEMENTED,
    ),
)


class ClassifiedError(NamedTuple):
    """User-facing text, log text and response status for one exception."""

    user_message: str
    log_message: str
    status_code: int


def status_code_for(exc: BaseException) -> int:
    """
    Return the HTTP status code for the exception's kind.

    The table is checked first. Package errors it does not cover fall
    back to their own ``status_code`` (e.g. ReportServerError -> 502).
    """
    for kinds, status_code in STATUS_TABLE:
        if isinstance(exc, kinds):
            return int(status_code)
    if isinstance(exc, AppException):
        return exc.status_code
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def inner_exception(exc: BaseException) -> Optional[BaseException]:
    """Explicit cause, else the implicit context unless it was suppressed."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def base_exception(exc: BaseException) -> BaseException:
    """Deepest exception of the cause chain (``exc`` itself if unwrapped)."""
    seen = {id(exc)}
    current = exc
    inner = inner_exception(current)
    while inner is not None and id(inner) not in seen:
        seen.add(id(inner))
        current = inner
        inner = inner_exception(current)
    return current


def format_stack_trace(exc: BaseException) -> Optional[str]:
    if exc.__traceback__ is None:
        return None
    trace = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
    return trace or None


def classify_exception(exc: BaseException, endpoint: str) -> ClassifiedError:
    """
    Build user and log messages and pick a status code for an exception.

    Pure function: it neither logs nor raises.

    Args:
        exc: The caught exception
        endpoint: Identifier of the endpoint that failed (e.g. request path)

    Returns:
        ClassifiedError(user_message, log_message, status_code)

    Example:
        >>> user, log, code = classify_exception(
        ...     NotFoundError("Item missing"), "/orders/5"
        ... )
        >>> code
        404
    """
    parts = [
        UNEXPECTED_ERROR_PREFIX,
        f" Endpoint: {endpoint}.",
        f" Exception kind: {type(exc).__name__}.",
    ]

    details = str(exc)
    if details:
        parts.append(f" Details: {details}")

    inner = inner_exception(exc)
    if inner is not None:
        parts.append(f" Inner Exception: {inner}")

    user_message = "".join(parts)

    log_parts = [user_message]
    stack_trace = format_stack_trace(exc)
    if stack_trace:
        log_parts.append(f" Stack Trace: {stack_trace}")

    root = base_exception(exc)
    if root is not exc:
        log_parts.append(f"Base Exception: {root}")

    return ClassifiedError(
        user_message=user_message,
        log_message="".join(log_parts),
        status_code=status_code_for(exc),
    )
