# ==============================================================================
# MAIN APPLICATION - FastAPI Entry Point
# ==============================================================================
# Application factory wiring logging, middleware, exception handlers and
# health endpoint around the helpers
# ==============================================================================

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from daily_helpers.api.handlers import register_exception_handlers
from daily_helpers.api.middleware import RequestLoggerMiddleware
from daily_helpers.api.responses import to_response
from daily_helpers.core.logging import setup_logger
from daily_helpers.core.settings import Settings, get_settings
from daily_helpers.schemas.result import ResultEnvelope

logger = logging.getLogger(__name__)


# ==============================================================================
# APPLICATION FACTORY
# ==============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    setup_logger(
        "daily_helpers",
        level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT.value,
    )
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT.value}")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggerMiddleware)

    register_exception_handlers(app)
    register_health_endpoints(app, settings)

    return app


# ==============================================================================
# HEALTH ENDPOINTS
# ==============================================================================

def register_health_endpoints(app: FastAPI, settings: Settings) -> None:
    """Register health check endpoints."""

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> JSONResponse:
        """Application health check."""
        return to_response(
            ResultEnvelope.success(
                "healthy",
                {"name": settings.APP_NAME, "version": settings.APP_VERSION},
            )
        )


# ==============================================================================
# DEVELOPMENT RUNNER
# ==============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "daily_helpers.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=get_settings().LOG_LEVEL.lower(),
    )
