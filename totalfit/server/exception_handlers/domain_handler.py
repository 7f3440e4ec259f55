"""
Handlers for TotalFit's own errors and unknown routes.

Both render the ``{"success": false, "error": ...}`` envelope used by the
JSON API.
"""

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from totalfit.core.errors import TotalFitError
from totalfit.core.logging_config import get_logger

logger = get_logger(__name__)


async def totalfit_error_handler(request: Request, exc: TotalFitError) -> JSONResponse:
    """Render a ``TotalFitError`` with the status code it carries."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", extra={"details": exc.details})
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Unknown routes get the JSON not-found envelope; other HTTP errors keep FastAPI's rendering."""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=404,
        content={"success": False, "error": "Not found", "path": request.url.path, "method": request.method},
    )
