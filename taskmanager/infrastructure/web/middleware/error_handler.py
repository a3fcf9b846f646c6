"""
Global error handling for the FastAPI application.
Maps domain exceptions to HTTP statuses and formats every failure the same way.
"""

import logging
import traceback
from typing import Any, Dict, List

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskmanager.config import settings
from taskmanager.domain.models.base import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthorizationError,
    AuthenticationError,
)

logger = logging.getLogger(__name__)


# Checked in order; the first matching class wins
DOMAIN_ERROR_STATUS = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (DuplicateEntityError, status.HTTP_409_CONFLICT, "Conflict"),
)

HTTP_ERROR_NAMES = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: "Payload Too Large",
}


def error_body(status_code: int, error: str, message: str) -> Dict[str, Any]:
    return {"error": error, "message": message, "status": status_code}


def format_domain_error(exc: DomainException) -> Dict[str, Any]:
    """Build the response body for a domain exception."""
    for exc_type, status_code, error in DOMAIN_ERROR_STATUS:
        if isinstance(exc, exc_type):
            return error_body(status_code, error, exc.message)

    return error_body(status.HTTP_400_BAD_REQUEST, "Bad Request", exc.message)


def format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(location) or None,
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type"),
        })
    return errors


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Log the exception and answer with a generic 500 body."""
        if isinstance(exc, DomainException):
            body = format_domain_error(exc)
            return JSONResponse(status_code=body["status"], content=body)

        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        body = error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred"
        )

        if settings.debug:
            body["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(status_code=body["status"], content=body)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    body = format_domain_error(exc)
    if body["status"] >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Domain error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=body["status"], content=body)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body, path or query validation failures are reported as 400."""
    errors = format_validation_errors(exc)
    first = errors[0] if errors else None
    message = "Invalid request data"
    if first and first["field"]:
        message = f"Invalid request data: {first['field']}: {first['message']}"

    body = error_body(status.HTTP_400_BAD_REQUEST, "Bad Request", message)
    body["errors"] = errors
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"The path {request.url.path} was not found"
    else:
        message = str(exc.detail)

    body = error_body(exc.status_code, HTTP_ERROR_NAMES.get(exc.status_code, "Error"), message)
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error boundary to ``app``."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(ErrorHandlerMiddleware)
