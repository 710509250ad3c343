"""Exception handlers for the FastAPI application."""

import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware.request_id import REQUEST_ID_HEADER
from api.middleware.security import SECURITY_HEADERS
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()

INTERNAL_ERROR_MESSAGE = "Internal server error"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "error_code": exc.error_code.value,
                "details": exc.details,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.detail,
                "error_code": ErrorCode.HTTP_ERROR.value,
                "details": None,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies as invalid input."""
        logger.info("validation_error", errors=exc.errors())
        details = [
            {
                "field": ".".join(str(x) for x in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        message = "Invalid request body"
        if exc.errors():
            loc = exc.errors()[0]["loc"]
            if len(loc) > 1 and loc[0] == "body" and isinstance(loc[1], str):
                message = f"Invalid value for {loc[1]}"
        return JSONResponse(
            status_code=400,
            content={
                "error": message,
                "error_code": ErrorCode.VALIDATION_ERROR.value,
                "details": details,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions without leaking their text.

        Runs outside the middleware stack, so the request ID and security
        headers are attached here.
        """
        request_id = getattr(request.state, "request_id", None) or request.headers.get(
            REQUEST_ID_HEADER, str(uuid.uuid4())
        )
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": INTERNAL_ERROR_MESSAGE,
                "error_code": ErrorCode.INTERNAL_ERROR.value,
                "details": {"request_id": request_id},
            },
            headers={REQUEST_ID_HEADER: request_id, **SECURITY_HEADERS},
        )
