"""Centralized translation of API errors into JSON responses."""
from typing import Any, cast
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from stock_api.core.errors import (
    BadCredentials,
    BadParams,
    Forbidden,
    NotFound,
    StockApiError,
    StoreError,
    Unauthorized,
    ValidationError,
)

logger = logging.getLogger(__name__)


STATUS_BY_ERROR: dict[type[StockApiError], int] = {
    NotFound: 404,
    Forbidden: 401,
    Unauthorized: 401,
    BadCredentials: 401,
    BadParams: 422,
    ValidationError: 422,
    StoreError: 500,
}


def status_for(exc: StockApiError) -> int:
    """Status code for an API error; unknown subclasses fall back to their nearest mapped base."""
    for klass in type(exc).__mro__:
        if klass in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[klass]
    return 500


def error_payload(name: str, message: str) -> dict[str, Any]:
    return {"error": {"name": name, "message": message}}


def _api_error_handler(_: Request, exc: StockApiError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(error_payload(exc.name, exc.message), status_code=status_code, headers=headers)


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first['msg']}" if location else first["msg"]
    else:
        message = ValidationError.default_message
    return JSONResponse(error_payload(ValidationError.name, message), status_code=422)


def _integrity_error_handler(_: Request, exc: IntegrityError) -> JSONResponse:
    logger.info("store rejected record: %s", exc.orig)
    return JSONResponse(error_payload(ValidationError.name, str(exc.orig)), status_code=422)


def _sqlalchemy_error_handler(_: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("unhandled database error: %s", exc, exc_info=exc)
    return JSONResponse(error_payload(StoreError.name, StoreError.default_message), status_code=500)


def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        error_payload("HTTPError", message),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def init_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the given FastAPI app."""
    app.add_exception_handler(StockApiError, cast(Any, _api_error_handler))
    app.add_exception_handler(RequestValidationError, cast(Any, _validation_exception_handler))
    app.add_exception_handler(IntegrityError, cast(Any, _integrity_error_handler))
    app.add_exception_handler(SQLAlchemyError, cast(Any, _sqlalchemy_error_handler))
    app.add_exception_handler(StarletteHTTPException, cast(Any, _http_exception_handler))
