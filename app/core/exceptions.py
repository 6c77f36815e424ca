"""
Application error taxonomy and the handlers that render it.

Every error leaves the API as ``{"error": ..., "code": ..., "message": ...}``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings

logger = logging.getLogger(__name__)

# Status code -> (code, default error) for errors raised by the framework itself
STATUS_CODES: Dict[int, tuple] = {
    400: ("VALIDATION_ERROR", "Bad request"),
    401: ("UNAUTHORIZED", "Unauthorized"),
    403: ("FORBIDDEN", "Forbidden"),
    404: ("NOT_FOUND", "Not found"),
    405: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    409: ("CONFLICT", "Conflict"),
    422: ("VALIDATION_ERROR", "Validation failed"),
    429: ("RATE_LIMITED", "Too many requests"),
    500: ("SERVER_ERROR", "Server error"),
    502: ("SERVICE_UNAVAILABLE", "Service unavailable"),
    503: ("SERVICE_UNAVAILABLE", "Service unavailable"),
    504: ("SERVICE_UNAVAILABLE", "Service unavailable"),
}


class AppError(Exception):
    status_code = 500
    code = "SERVER_ERROR"

    def __init__(
        self,
        error: str,
        message: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(error)
        self.error = error
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "code": self.code}
        if self.message:
            body["message"] = self.message
        body.update(self.extra)
        return body


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"


class UnauthorizedError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(AppError):
    status_code = 409
    code = "CONFLICT"


class DatabaseError(AppError):
    status_code = 500
    code = "DATABASE_ERROR"


class ServerError(AppError):
    status_code = 500
    code = "SERVER_ERROR"


class UpstreamServiceError(AppError):
    """An external dependency (Groq, EmailJS, the fetched site) failed."""
    status_code = 502
    code = "SERVICE_UNAVAILABLE"


def database_error(exc: APIError, context: str) -> AppError:
    """Translate a PostgREST error into the app taxonomy"""
    if exc.code == "23505":
        return ConflictError(
            f"Duplicate entry in {context}",
            message="This item already exists.",
            code="DUPLICATE_ENTRY",
        )
    if exc.code == "23503":
        return ConflictError(
            f"Related data error in {context}",
            message="This action cannot be completed due to related data.",
            code="RELATED_DATA_ERROR",
        )
    return DatabaseError("Database error", message=exc.message)


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.error, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    code, default_error = STATUS_CODES.get(exc.status_code, ("UNKNOWN_ERROR", "Unknown error"))
    body: Dict[str, Any] = {"error": default_error, "code": code}
    if isinstance(exc.detail, str) and exc.detail:
        body["message"] = exc.detail
    if exc.status_code == 405:
        body["message"] = f"{request.method} is not supported for this endpoint"
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or "request"
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "message": f"Please check the {field} field: {first.get('msg', 'invalid value')}",
        },
    )


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "error": "Rate limited",
            "code": "RATE_LIMITED",
            "message": "Too many requests. Please wait a moment and try again.",
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    body: Dict[str, Any] = {
        "error": "Internal server error",
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
    }
    if not settings.is_production:
        body["details"] = str(exc)
    return JSONResponse(status_code=500, content=body)
