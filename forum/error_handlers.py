"""Exception handlers mapping failures onto JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.errors import ForumError, HashingError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

PRESENCE_MESSAGE = "All fields are required."


def _field_name(loc) -> str:
    parts = [str(x) for x in loc if x not in ("body", "query", "path", "header")]
    return ".".join(parts)


def _is_presence_error(error: dict) -> bool:
    if error.get("type") == "missing":
        return True
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def validation_error_from_request(exc: RequestValidationError) -> ValidationError:
    """Presence problems are reported before format problems."""
    errors = exc.errors() or []
    fields = [
        {"field": _field_name(err.get("loc", [])), "message": err.get("msg") or "Invalid input."}
        for err in errors
    ]

    missing = [field for field, err in zip(fields, errors, strict=True) if _is_presence_error(err)]
    if missing:
        return ValidationError(PRESENCE_MESSAGE, errors=missing)

    if not fields:
        return ValidationError()
    first = fields[0]
    message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    return ValidationError(message, errors=fields)


async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = validation_error_from_request(exc)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = NotFoundError(request.url.path)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def hashing_error_handler(request: Request, exc: HashingError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Password hashing failed."},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForumError, forum_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(HashingError, hashing_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
