# =============================================================================
# REPORT SERVER CLIENT - Reporting Services URL-Access Rendering
# =============================================================================
# Renders server-side reports (PDF, Excel, Word, ...) over HTTP.
#
# Configuration is an explicit ReportServerConfig handed to each client;
# there is no process-wide state and no configure-before-use ordering.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

import httpx
from fastapi import Response
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from daily_helpers.api.responses import file_response
from daily_helpers.core.exceptions import ConfigurationError, ReportServerError

logger = logging.getLogger(__name__)

# Render format -> (media type, file extension)
REPORT_FORMATS: Dict[str, Tuple[str, str]] = {
    "PDF": ("application/pdf", "pdf"),
    "EXCEL": ("application/vnd.ms-excel", "xls"),
    "EXCELOPENXML": (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "xlsx",
    ),
    "WORD": ("application/msword", "doc"),
    "WORDOPENXML": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "docx",
    ),
    "CSV": ("text/csv", "csv"),
    "XML": ("application/xml", "xml"),
    "IMAGE": ("image/tiff", "tif"),
    "MHTML": ("multipart/related", "mhtml"),
}


class ReportServerConfig(BaseSettings):
    """
    Connection settings for a report server.

    Loaded from ``REPORT_SERVER_*`` environment variables, built directly,
    or read from a flat configuration mapping with ``from_configuration``.

    Attributes:
        environment: Deployment environment name (e.g. Development)
        target_server_url: Report server URL-access endpoint
        target_report_folder: Folder prefix prepended to report names
        username: Account used to authenticate
        password: Account password
        domain: Account domain
        timeout_seconds: Request timeout
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(
        default="Development",
        description="Deployment environment name"
    )
    target_server_url: str = Field(
        ...,
        min_length=1,
        description="Report server URL"
    )
    target_report_folder: str = Field(
        ...,
        description="Folder that holds the reports"
    )
    username: str = Field(
        ...,
        description="Report server account"
    )
    password: SecretStr = Field(
        ...,
        description="Report server account password"
    )
    domain: str = Field(
        ...,
        description="Report server account domain"
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Render request timeout in seconds"
    )

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "ReportServerConfig":
        """
        Build the config from a flat key/value configuration.

        The server URL is looked up per environment:
        ``TargetServerURL{Environment}`` (e.g. ``TargetServerURLProduction``).

        Raises:
            ConfigurationError: If any required key is missing or empty
        """
        environment = configuration.get("Environment")
        keys = {
            "environment": "Environment",
            "target_server_url": f"TargetServerURL{environment or ''}",
            "target_report_folder": "TargetReportFolder",
            "username": "userServer",
            "password": "passServer",
            "domain": "Domain",
        }
        missing = [key for key in keys.values() if not configuration.get(key)]
        if missing:
            raise ConfigurationError(
                message="Report server configuration is incomplete",
                details={"missing_keys": missing},
            )
        return cls(**{field: configuration[key] for field, key in keys.items()})


@dataclass(frozen=True)
class RenderedReport:
    """Bytes of a rendered report and how to serve them."""
    content: bytes
    media_type: str
    extension: str


class ReportServerClient:
    """
    Renders reports through the report server's URL-access interface.

    Each ``render`` call opens its own ``httpx.AsyncClient``; pass
    ``transport`` to route requests elsewhere (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: ReportServerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    def report_path(self, report_name: str) -> str:
        return f"{self.config.target_report_folder}{report_name}"

    def build_render_url(
        self,
        report_name: str,
        report_format: str = "PDF",
        parameters: Optional[Mapping[str, Any]] = None,
        device_info: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Build the URL-access render URL.

        Layout: ``{server}?{report path}&rs:Command=Render&rs:Format=...``
        followed by ``rc:`` device-info settings and report parameters.
        """
        query: List[Tuple[str, str]] = [
            ("rs:Command", "Render"),
            ("rs:Format", report_format.upper()),
        ]
        for key, value in (device_info or {}).items():
            query.append((f"rc:{key}", str(value)))
        for key, value in (parameters or {}).items():
            if isinstance(value, (list, tuple)):
                query.extend((key, str(item)) for item in value)
            elif value is None:
                query.append((f"{key}:isnull", "true"))
            else:
                query.append((key, str(value)))

        base_url = self.config.target_server_url.rstrip("?")
        path = quote(self.report_path(report_name), safe="/")
        return f"{base_url}?{path}&{urlencode(query)}"

    def _auth(self) -> httpx.BasicAuth:
        user = f"{self.config.domain}\\{self.config.username}" if self.config.domain else self.config.username
        return httpx.BasicAuth(user, self.config.password.get_secret_value())

    async def render(
        self,
        report_name: str,
        report_format: str = "PDF",
        parameters: Optional[Mapping[str, Any]] = None,
        device_info: Optional[Mapping[str, Any]] = None,
    ) -> RenderedReport:
        """
        Render a report.

        Args:
            report_name: Report name inside the configured folder
            report_format: Render extension (PDF, EXCELOPENXML, CSV, ...)
            parameters: Report parameter values
            device_info: Device-info settings for the render extension

        Returns:
            RenderedReport with the rendered bytes

        Raises:
            ReportServerError: If the server answers with an error status
            httpx.TimeoutException: If the server does not answer in time
        """
        url = self.build_render_url(report_name, report_format, parameters, device_info)
        report_path = self.report_path(report_name)
        logger.info(f"Rendering report {report_path} as {report_format.upper()}")

        async with httpx.AsyncClient(
            auth=self._auth(),
            timeout=httpx.Timeout(self.config.timeout_seconds, connect=5.0),
            transport=self._transport,
        ) as client:
            response = await client.get(url)

        if response.is_error:
            logger.warning(
                f"Report server returned {response.status_code} for {report_path}"
            )
            raise ReportServerError(
                message=f"Report server returned {response.status_code} rendering {report_path}",
                upstream_status=response.status_code,
                report_path=report_path,
            )

        default_type, extension = REPORT_FORMATS.get(
            report_format.upper(), ("application/octet-stream", report_format.lower())
        )
        media_type = response.headers.get("content-type", default_type).split(";")[0].strip()
        return RenderedReport(
            content=response.content,
            media_type=media_type or default_type,
            extension=extension,
        )


async def render_report_response(
    client: ReportServerClient,
    report_name: str,
    report_format: str = "PDF",
    parameters: Optional[Mapping[str, Any]] = None,
    device_info: Optional[Mapping[str, Any]] = None,
) -> Response:
    """Render a report and wrap the bytes in an inline file response."""
    report = await client.render(report_name, report_format, parameters, device_info)
    return file_response(report.content, report.media_type)
