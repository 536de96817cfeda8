"""Exception handlers that render every error as ``{"error": "<message>"}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import RegistryError, StorageIOError

logger = logging.getLogger(__name__)

_REQUEST_PARTS = ("body", "query", "path", "header", "cookie")


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request input is a 400 with the first problem spelled out."""
    errors = exc.errors()
    logger.info("Invalid request on %s %s: %s", request.method, request.url.path, errors)
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request"},
        )

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in _REQUEST_PARTS]
    message = first.get("msg", "Invalid value")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"{'.'.join(loc)}: {message}" if loc else message},
    )


async def handle_storage_error(request: Request, exc: StorageIOError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Storage operation failed"},
    )


async def handle_registry_error(request: Request, exc: RegistryError) -> JSONResponse:
    """Fallback for registry errors an endpoint did not map explicitly."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StorageIOError, handle_storage_error)
    app.add_exception_handler(RegistryError, handle_registry_error)
