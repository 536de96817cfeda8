"""Rejects oversized model uploads before the multipart body is spooled."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.domain.exceptions import SizeLimitExceededError

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/v1/admin/upload"


async def enforce_upload_content_length(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Check the declared request size of ``POST /admin/upload``.

    The form parser writes the whole body to a temporary file before the
    endpoint runs, so the ceiling has to be applied here, from the
    ``Content-Length`` header. Bodies without one are refused with 411.
    """
    if request.method != "POST" or request.url.path != UPLOAD_PATH:
        return await call_next(request)

    settings = get_settings()
    declared = request.headers.get("content-length")
    if declared is None or not declared.isdigit():
        logger.warning("Upload refused: no usable Content-Length (%r)", declared)
        return JSONResponse(
            status_code=status.HTTP_411_LENGTH_REQUIRED,
            content={"error": "Content-Length header is required for uploads"},
        )

    if int(declared) > settings.upload_request_limit_bytes:
        logger.warning(
            "Upload refused: Content-Length %s exceeds %d bytes",
            declared,
            settings.upload_request_limit_bytes,
        )
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={"error": str(SizeLimitExceededError(settings.max_upload_bytes))},
            headers={"Connection": "close"},
        )

    return await call_next(request)
