# ==============================================================================
# RESPONSE HELPERS - Result and File Responses
# ==============================================================================
# Translate ResultEnvelope values and raw file bytes into FastAPI responses
# ==============================================================================

from __future__ import annotations

from urllib.parse import quote

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from daily_helpers.schemas.result import ResultEnvelope


def to_response(result: ResultEnvelope) -> JSONResponse:
    """
    Convert a result envelope into a JSON response.

    Body is ``{"success": bool, "message": str, "content": any}``; the
    status line is the envelope's status code, or 500 when it was left unset.
    """
    return JSONResponse(
        status_code=result.effective_status_code,
        content=jsonable_encoder(result.to_body()),
    )


def file_response(contents: bytes, media_type: str) -> Response:
    """Serve raw bytes inline with the given media type."""
    return Response(content=contents, media_type=media_type)


def download_file_response(contents: bytes, media_type: str, filename: str) -> Response:
    """
    Serve raw bytes as a download.

    Non-ASCII file names are sent through ``filename*`` (RFC 5987) with an
    ASCII fallback in ``filename``.
    """
    ascii_name = filename.encode("ascii", "ignore").decode("ascii").replace('"', "") or "download"
    disposition = f'attachment; filename="{ascii_name}"'
    if ascii_name != filename:
        disposition += f"; filename*=utf-8''{quote(filename)}"

    return Response(
        content=contents,
        media_type=media_type,
        headers={"Content-Disposition": disposition},
    )
