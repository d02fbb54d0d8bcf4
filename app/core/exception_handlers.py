# app/core/exception_handlers.py
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.utils.database_utils import is_foreign_key_violation
from app.utils.logger import logger


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"[Validation] {request.method} {request.url.path} - {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation error",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error(f"[HTTP] {request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Constraint text stays in the log, never in the response
    logger.warning(f"[DB] {request.method} {request.url.path} - {exc.orig}")
    if is_foreign_key_violation(exc):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Referenced record does not exist or is still in use"},
        )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Record conflicts with existing data"},
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"[Unhandled] {request.method} {request.url.path} - {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error": str(exc),
        },
    )
