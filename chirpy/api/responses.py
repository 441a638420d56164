"""JSON response helpers shared by the API routes."""
from __future__ import annotations

import structlog
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from chirpy.models.schemas import ErrorResponse

GENERIC_ERROR_MESSAGE = "Something went wrong"

_LOG = structlog.get_logger(__name__)


def respond_with_json(status_code: int, payload: BaseModel) -> Response:
    """Serialize payload; answer 500 with a generic error body if that fails."""
    try:
        body = payload.model_dump_json()
    except (ValueError, TypeError):
        _LOG.exception("json_encode_failed", payload_type=type(payload).__name__)
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})
    return Response(content=body, status_code=status_code, media_type="application/json")


def respond_with_error(status_code: int, message: str, exc: BaseException | None = None) -> Response:
    """Build an `{"error": ...}` response, logging the cause and any 5XX."""
    if exc is not None:
        _LOG.warning("request_error", error=str(exc), error_type=type(exc).__name__)
    if status_code > 499:
        _LOG.error("responding_with_5xx", status_code=status_code, message=message)
    return respond_with_json(status_code, ErrorResponse(error=message))
