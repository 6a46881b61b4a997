# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Services Module
===============

- Exception classifier: exception -> (user message, log message, status)
- Report server client: explicit-config report rendering over HTTP
"""

from daily_helpers.services.exception_classifier import (
    ClassifiedError,
    classify_exception,
)
from daily_helpers.services.reporting import (
    RenderedReport,
    ReportServerClient,
    ReportServerConfig,
    render_report_response,
)

__all__ = [
    "ClassifiedError",
    "classify_exception",
    "RenderedReport",
    "ReportServerClient",
    "ReportServerConfig",
    "render_report_response",
]
