# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Set test environment before importing the package
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"

from daily_helpers.core.settings import Settings  # noqa: E402
from daily_helpers.services.reporting import ReportServerConfig  # noqa: E402


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture
def app() -> FastAPI:
    """Application with a few routes that raise on purpose."""
    from daily_helpers.core.exceptions import NotFoundError, ReportServerError
    from daily_helpers.main import create_app

    application = create_app(Settings(APP_NAME="Daily Helpers Test", APP_VERSION="9.9.9"))

    @application.get("/orders/{order_id}")
    async def get_order(order_id: int) -> dict:
        raise NotFoundError("Item missing", resource_type="order", resource_id=order_id)

    @application.get("/lookup")
    async def lookup() -> dict:
        return {}["missing"]

    @application.get("/unfinished")
    async def unfinished() -> dict:
        raise NotImplementedError("Coming soon")

    @application.get("/reports/{name}")
    async def report(name: str) -> dict:
        raise ReportServerError("Report server unavailable", upstream_status=503, report_path=name)

    @application.get("/broken")
    async def broken() -> dict:
        try:
            int("not-a-number")
        except ValueError as exc:
            raise RuntimeError("Order import failed") from exc
        return {}

    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    # Starlette re-raises after the catch-all handler has sent its response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def report_config() -> ReportServerConfig:
    """Report server settings pointing at a fake server."""
    return ReportServerConfig(
        environment="Development",
        target_server_url="http://reports.test/ReportServer",
        target_report_folder="/Sales/",
        username="svc_reports",
        password="s3cret",
        domain="CORP",
    )
