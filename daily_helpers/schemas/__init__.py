# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Response and message shapes shared by API handlers:
- Result: immutable operation outcome (ResultEnvelope)
- Message: typed, nestable message wrapper
"""

from daily_helpers.schemas.message import Message, MessageType
from daily_helpers.schemas.result import ResultEnvelope, strip_line_breaks

__all__ = [
    "Message",
    "MessageType",
    "ResultEnvelope",
    "strip_line_breaks",
]
