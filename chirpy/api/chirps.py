from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import ValidationError

from chirpy.api.responses import respond_with_error, respond_with_json
from chirpy.models.schemas import ChirpRequest, CleanedChirpResponse
from chirpy.services.chirp_service import ChirpTooLongError, clean_chirp

router = APIRouter(prefix="/api", tags=["chirps"])


@router.post("/validate_chirp", response_model=CleanedChirpResponse)
async def validate_chirp(request: Request) -> Response:
    raw = await request.body()
    try:
        payload = ChirpRequest.model_validate_json(raw)
    except ValidationError as exc:
        return respond_with_error(500, "couldn't decode", exc)

    try:
        cleaned = clean_chirp(payload.body)
    except ChirpTooLongError as exc:
        return respond_with_error(400, "chirpy looong", exc)

    return respond_with_json(200, CleanedChirpResponse(cleaned_body=cleaned))
