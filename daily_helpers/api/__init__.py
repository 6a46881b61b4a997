# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI integration:
- Responses: ResultEnvelope / file bytes -> HTTP responses
- Handlers: classified exception handlers
- Middleware: request logging
"""

from daily_helpers.api.responses import (
    download_file_response,
    file_response,
    to_response,
)

__all__ = [
    "download_file_response",
    "file_response",
    "to_response",
]
