import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Unexpected server error. Check logs."

# SQLSTATE class 23 codes reported by Postgres drivers
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"
_CHECK_VIOLATION = "23514"


def classify_integrity_error(exc: IntegrityError) -> tuple[int, str]:
    """Map a constraint violation onto (status_code, message) without leaking driver codes."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    text = str(orig or exc).lower()
    if code == _UNIQUE_VIOLATION or "unique constraint" in text or "duplicate key" in text:
        return status.HTTP_409_CONFLICT, "Duplicate value violates a unique constraint."
    if code == _FOREIGN_KEY_VIOLATION or "foreign key constraint" in text:
        return status.HTTP_400_BAD_REQUEST, "Related record does not exist."
    if code == _CHECK_VIOLATION or "check constraint" in text:
        return status.HTTP_400_BAD_REQUEST, "Constraint check failed."
    return status.HTTP_400_BAD_REQUEST, "Request violates a data constraint."


def _message(detail) -> str:
    if isinstance(detail, str):
        return detail
    return "Request failed."


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": _message(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        msg = "Invalid request."
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": msg})


async def integrity_error_handler(request: Request, exc: IntegrityError):
    code, msg = classify_integrity_error(exc)
    logger.info("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=code, content={"message": msg})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": GENERIC_SERVER_ERROR})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
