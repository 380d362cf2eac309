"""
Central translation of raised errors into JSON error responses.

Every error body has the shape ``{"message": str}``. Errors carrying a
status code keep it; anything else becomes a 500.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from named_queries.core.exceptions import AppError, QueryValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
VALIDATION_ERROR_MESSAGE = "Named query validation failed"


def _distinct_statuses(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.distinct_error_statuses)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error response."""
    return JSONResponse(status_code=status_code, content={"message": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle errors raised by routes and services."""
    status_code = exc.resolve_status(_distinct_statuses(request))
    logger.info(
        "%s %s -> %d: %s", request.method, request.url.path, status_code, exc.message
    )
    return error_response(status_code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Surface body/parameter validation errors as a single opaque failure."""
    logger.warning(
        "Validation failed for %s %s: %s", request.method, request.url.path, exc.errors()
    )
    return await app_error_handler(request, QueryValidationError(VALIDATION_ERROR_MESSAGE))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors (unknown routes, wrong methods, ...)."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def catch_unhandled_errors(request: Request, call_next):
    """Middleware turning any unexpected exception into a 500 response."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers and the catch-all middleware on the app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(catch_unhandled_errors)
