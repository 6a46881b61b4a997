# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================

"""
Core Module
===========

Cross-cutting infrastructure:
- Settings: pydantic-settings configuration
- Logging: console logger setup (text / JSON)
- Exceptions: package error hierarchy
"""

from daily_helpers.core.exceptions import (
    AppException,
    ArgumentNullError,
    ConfigurationError,
    ConflictError,
    InvalidArgumentError,
    InvalidOperationError,
    NotFoundError,
    ReportServerError,
    ValidationError,
)
from daily_helpers.core.logging import setup_logger, get_logger
from daily_helpers.core.settings import Settings, get_settings

__all__ = [
    "AppException",
    "ArgumentNullError",
    "ConfigurationError",
    "ConflictError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "NotFoundError",
    "ReportServerError",
    "ValidationError",
    "setup_logger",
    "get_logger",
    "Settings",
    "get_settings",
]
