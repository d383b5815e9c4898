# app/core/error_handlers.py

from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback
import uuid

from .exceptions import PrintQuoteError

logger = logging.getLogger(__name__)

def setup_error_handlers(app: FastAPI):
    """Set up global error handlers for the FastAPI application."""

    @app.exception_handler(PrintQuoteError)
    async def printquote_error_handler(request: Request, exc: PrintQuoteError):
        """Handle custom PrintQuote errors."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"PrintQuote Error: {exc.code.value}",
            extra={
                "error_code": exc.code.value,
                "user_message": exc.user_message,
                "technical_details": exc.technical_details,
                "context": exc.context,
                "request_url": str(request.url),
                "request_method": request.method,
                "client_ip": request.client.host if request.client else None
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors with better formatting."""
        errors = []
        for error in exc.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            "Validation error",
            extra={
                "validation_errors": errors,
                "request_url": str(request.url),
                "request_method": request.method
            }
        )

        return JSONResponse(
            status_code=422,
            content={
                "error": "Request validation failed",
                "details": errors
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle standard HTTP exceptions with the flat error body."""
        logger.warning(
            f"HTTP Exception: {exc.status_code}",
            extra={
                "status_code": exc.status_code,
                "detail": exc.detail,
                "request_url": str(request.url),
                "request_method": request.method
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions with proper logging."""
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            extra={
                "exception_type": type(exc).__name__,
                "request_url": str(request.url),
                "request_method": request.method,
                "traceback": traceback.format_exc()
            }
        )

        # Don't expose internal details
        return JSONResponse(
            status_code=500,
            content={"error": "Server error"}
        )

# Middleware for request ID tracking
async def add_request_id_middleware(request: Request, call_next):
    """Add request ID for better error tracking."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response

# Middleware for access logging
async def log_requests_middleware(request: Request, call_next):
    """Log every incoming request as '<timestamp> - <METHOD> <path>'."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    logger.info(f"{timestamp} - {request.method} {request.url.path}")
    return await call_next(request)
