"""FastAPI application entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.errors import ApiError, ErrorKind
from app.repositories.memory import InMemoryStore
from app.routes import posts_router, users_router
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

_HTTP_EXCEPTION_CODES: dict[int, str] = {
    404: ErrorKind.NOT_FOUND.value,
    405: "METHOD_NOT_ALLOWED",
}


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Blog API", version="0.1.0")
    app.state.store = InMemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_, exc: RequestValidationError) -> JSONResponse:
        return _error_response(422, ErrorKind.VALIDATION.value, "Invalid request payload")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            message = f"Not Found - {request.url.path}"
        else:
            message = str(exc.detail)
        code = _HTTP_EXCEPTION_CODES.get(exc.status_code, "HTTP_ERROR")
        return _error_response(exc.status_code, code, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "request.unhandled_error method=%s path=%s error=%s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        return _error_response(500, ErrorKind.INTERNAL.value, "An unknown error occurred.")

    api_prefix = "/api"
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(posts_router, prefix=api_prefix)

    return app
