"""
API utility functions for error formatting.
"""

from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.errors import ValidationError
from taskboard.core.logger import logger
from taskboard.internal.api.validation import format_validation_errors


def error_response(message: str) -> Dict:
    """
    Create an error body.

    Args:
        message: Error message, safe to show to API callers

    Returns:
        `{"error": message}`
    """
    return {"error": message}


def validation_error_response(messages) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(",".join(messages)),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = format_validation_errors(exc.errors())
    logger.warning(
        f"API: Validation failed for {request.method} {request.url.path}: {messages}"
    )
    return validation_error_response(messages)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(
        f"API: Validation failed for {request.method} {request.url.path}: {exc.messages}"
    )
    return validation_error_response(exc.messages)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every API error as `{"error": ...}`; validation failures are 400."""
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
