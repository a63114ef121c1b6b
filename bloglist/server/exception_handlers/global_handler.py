"""
Exception Handlers for the FastAPI Application.

Every error leaves the API as ``{"error": "<message>"}``. Known failures
(HTTP errors raised by the routers, request validation, duplicate usernames,
bad tokens) get a specific status code; anything else is logged with its
full context and answered with a 500 that carries an error ID.
"""

import traceback

import jwt
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.core.logging_config import get_logger

logger = get_logger(__name__)

UNIQUE_USERNAME_MESSAGE = "expected `username` to be unique"


def error_response(status_code: int, message: str, headers: dict | None = None, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors raised by the routers.

    A 404 produced by the router itself (no route matched) is reported as an
    unknown endpoint.
    """
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "unknown endpoint"
    return error_response(exc.status_code, str(message), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures as 400 Bad Request.

    A path parameter that cannot be parsed (e.g. a non-numeric id) is
    reported as a malformatted id.
    """
    errors = exc.errors()
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        return error_response(status.HTTP_400_BAD_REQUEST, "malformatted id")

    messages = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    logger.debug(f"Rejected request to {request.method} {request.url.path}: {messages}")
    return error_response(status.HTTP_400_BAD_REQUEST, "; ".join(messages))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Render database constraint violations as 400 Bad Request."""
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    logger.warning(f"Integrity error in {request.method} {request.url.path}: {detail}")
    if "username" in detail.lower():
        return error_response(status.HTTP_400_BAD_REQUEST, UNIQUE_USERNAME_MESSAGE)
    return error_response(status.HTTP_400_BAD_REQUEST, detail)


async def token_error_handler(request: Request, exc: jwt.InvalidTokenError) -> JSONResponse:
    """Render token verification failures as 401 Unauthorized."""
    message = "token expired" if isinstance(exc, jwt.ExpiredSignatureError) else "token invalid"
    logger.info(f"Rejected token in {request.method} {request.url.path}: {exc}")
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    # Generate unique error ID for tracking
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal server error",
        error_id=error_id,
        error_type=type(exc).__name__,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(jwt.InvalidTokenError, token_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
