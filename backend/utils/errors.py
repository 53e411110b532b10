# utils/errors.py
"""Global exception handlers.

Every failure leaves the API as ``{"error": "<message>"}``:
    - HTTPException raised by a route keeps its status and detail
    - request validation errors become 400 and list the offending fields
    - database and unexpected errors become a generic 500, details go to the log only
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            name = "body"
        else:
            loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
            name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    logger.info("Rejected %s %s: invalid %s", request.method, request.url.path, fields)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Missing or invalid fields: " + ", ".join(fields),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)
