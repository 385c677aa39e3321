"""Exception Handlers.

애플리케이션 예외를 공통 에러 응답 포맷으로 변환합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps._shared.exceptions.base import ApplicationError
from apps._shared.responses import GlobalExceptionResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    body = GlobalExceptionResponse(status=status_code, message=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        if exc.status_code >= 500:
            logger.error(
                "Application error",
                extra={"path": request.url.path, "code": exc.code, "detail": exc.message},
            )
        return _error_response(exc.status_code, exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(400, _first_validation_message(exc), "INVALID_REQUEST")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")
