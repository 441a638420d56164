from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from chirpy.api.responses import GENERIC_ERROR_MESSAGE, respond_with_error
from chirpy.observability.metrics import HitCounter


REQUEST_ID_HEADER = "X-Request-ID"

_LOG = structlog.get_logger(__name__)


class RequestContextMiddleware:
    """Adds request_id context, access logs, and the generic 500 for unhandled errors."""

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path"),
            method=scope.get("method"),
        )

        start = perf_counter()
        status_code: int = 500
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, response_started

            if message.get("type") == "http.response.start":
                response_started = True
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers[REQUEST_ID_HEADER] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            # Logged here while the request context is still bound.
            _LOG.exception("unhandled_api_exception")
            if response_started:
                raise
            response = respond_with_error(500, GENERIC_ERROR_MESSAGE)
            await response(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0
            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )
            structlog.contextvars.clear_contextvars()


class FileserverHitsMiddleware:
    """Counts every HTTP request before handing it to the wrapped file server."""

    def __init__(self, app: Callable[..., Any], counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") == "http":
            self.counter.add(1)
        await self.app(scope, receive, send)
