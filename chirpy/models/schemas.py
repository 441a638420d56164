from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ChirpRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    body: str = ""

    @field_validator("body", mode="before")
    @classmethod
    def _null_body_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CleanedChirpResponse(BaseModel):
    cleaned_body: str


class ErrorResponse(BaseModel):
    error: str
