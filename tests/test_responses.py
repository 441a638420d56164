import json
from typing import Any

from pydantic import BaseModel

from chirpy.api.responses import GENERIC_ERROR_MESSAGE, respond_with_error, respond_with_json
from chirpy.models.schemas import CleanedChirpResponse


class _Unserializable(BaseModel):
    value: Any


def test_respond_with_json_encodes_payload() -> None:
    resp = respond_with_json(200, CleanedChirpResponse(cleaned_body="hello"))
    assert resp.status_code == 200
    assert resp.media_type == "application/json"
    assert json.loads(resp.body) == {"cleaned_body": "hello"}


def test_respond_with_json_encoding_failure_is_generic_500() -> None:
    resp = respond_with_json(200, _Unserializable(value=object()))
    assert resp.status_code == 500
    assert json.loads(resp.body) == {"error": GENERIC_ERROR_MESSAGE}


def test_respond_with_error_uses_error_envelope() -> None:
    resp = respond_with_error(400, "chirpy looong")
    assert resp.status_code == 400
    assert json.loads(resp.body) == {"error": "chirpy looong"}


def test_respond_with_error_accepts_cause() -> None:
    resp = respond_with_error(500, "couldn't decode", ValueError("bad json"))
    assert resp.status_code == 500
    assert json.loads(resp.body) == {"error": "couldn't decode"}


async def test_unhandled_exceptions_become_generic_500(chirpy_app, caplog) -> None:
    from httpx import ASGITransport, AsyncClient

    @chirpy_app.get("/api/boom")
    async def boom() -> dict:
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=chirpy_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api/boom", headers={"X-Request-ID": "boom-1"})
    assert resp.status_code == 500
    assert resp.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert resp.headers["x-request-id"] == "boom-1"

    logged = [r.msg for r in caplog.records if isinstance(r.msg, dict) and r.msg.get("event") == "unhandled_api_exception"]
    assert logged
    assert logged[0]["request_id"] == "boom-1"
    assert logged[0]["path"] == "/api/boom"
