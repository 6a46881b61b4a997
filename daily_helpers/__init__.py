# ==============================================================================
# DAILY HELPERS PACKAGE INITIALIZATION
# ==============================================================================
# Stateless helpers for FastAPI web APIs
# ==============================================================================

"""
Daily Helpers
=============

Small, stateless helpers shared by FastAPI services.

Features:
---------
- ResultEnvelope: immutable operation outcome with HTTP status code
- Exception classifier: exception -> user message, log message, status code
- Message wrapper: typed, nestable, JSON-serializable messages
- Helpers for strings, dates, numbers, Base64 and validation errors
- Report server client with explicit configuration

Usage:
------
    from daily_helpers import ResultEnvelope, classify_exception

    user_message, log_message, status_code = classify_exception(exc, "/orders/5")
    result = ResultEnvelope.failure(user_message, None, status_code)
"""

from daily_helpers.schemas.message import Message, MessageType
from daily_helpers.schemas.result import ResultEnvelope
from daily_helpers.services.exception_classifier import ClassifiedError, classify_exception

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ClassifiedError",
    "Message",
    "MessageType",
    "ResultEnvelope",
    "classify_exception",
]
