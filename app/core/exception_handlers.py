import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from app.core.errors import OrderServiceError
from app.schemas.response import ErrorDetail, ErrorResponse

log = logging.getLogger("exception_handlers")


def _error_body(code: str, message, details=None, retryable=None) -> dict:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details, retryable=retryable))
    return body.model_dump(exclude_none=True)


# ----------- Exception Handlers (called by FastAPI) -----------

def http_exception_handler(request: Request, exc: HTTPException):
    """Handles exceptions raised by HTTPException (e.g., 404, 400)."""
    body = _error_body("http_error", exc.detail)
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def order_service_exception_handler(request: Request, exc: OrderServiceError):
    """Handles domain errors raised by the service layer (not found, not authorized, bad transition...)."""
    body = _error_body(exc.code, exc.message, details=exc.details, retryable=exc.retryable or None)
    return JSONResponse(status_code=exc.status_code, content=body)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handles Pydantic validation errors (422 Unprocessable Entity)."""
    body = _error_body("validation_error", "Invalid input data", details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=422, content=body)


def generic_exception_handler(request: Request, exc: Exception):
    """Handles all unhandled exceptions (500 Internal Server Error)."""
    log.exception(f"Unhandled exception on path: {request.url.path}", exc_info=exc)

    body = _error_body("server_error", "Internal Server Error")
    return JSONResponse(status_code=500, content=body)


# ----------- Registration Function -----------

def setup_exception_handlers(app: FastAPI):
    """Registers all custom exception handlers with the FastAPI application."""

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(OrderServiceError, order_service_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app
