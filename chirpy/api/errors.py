"""Exception handlers mapping HTTP errors onto the `{"error": ...}` envelope.

Unhandled exceptions are answered by `RequestContextMiddleware`.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.api.responses import respond_with_error


def register_exception_handlers(app: FastAPI) -> None:
    """Register process-wide FastAPI exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(_: Request, exc: StarletteHTTPException):
        response = respond_with_error(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

