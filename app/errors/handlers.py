"""
Exception handlers for the FastAPI application.

Every failure response has the shape {"error": "<message>"}. Driver errors,
query text and stack traces never reach the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors.errors import (
    INTERNAL_MESSAGE,
    INTERNAL_STATUS_CODE,
    ExpenseAPIError,
    InvalidInputError,
    message_for,
    status_for,
)
from app.utils.logging_config import request_context

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ExpenseAPIError)
    async def handle_expense_api_error(request: Request, exc: ExpenseAPIError) -> JSONResponse:
        status_code = status_for(exc)
        logger.error(
            f"Request failed: {request_context(request)} status={status_code} kind={exc.kind.value} error={exc!r}"
        )
        return error_response(status_code, message_for(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # malformed JSON, missing fields and mistyped fields all look the same to the caller
        invalid = InvalidInputError()
        logger.error(
            f"Request validation failed: {request_context(request)} errors={len(exc.errors())}"
        )
        return error_response(status_for(invalid), message_for(invalid))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.warning(f"HTTP error: {request_context(request)} status={exc.status_code}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unexpected error: {request_context(request)} type={type(exc).__name__}")
        return error_response(INTERNAL_STATUS_CODE, INTERNAL_MESSAGE)
