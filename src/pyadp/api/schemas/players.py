from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from pyadp.models import PlayerRecord


class PlayersResponse(BaseModel):
    format: str
    players: List[PlayerRecord]
    last_updated: str = Field(..., alias="lastUpdated")
    count: int = Field(..., ge=0)

    model_config = ConfigDict(populate_by_name=True)


class InvalidFormatResponse(BaseModel):
    error: str = "Invalid format"
    supported_formats: List[str] = Field(..., alias="supportedFormats")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
    message: str


class FormatCacheStatus(BaseModel):
    cached: bool
    last_fetch: str | None = Field(default=None, alias="lastFetch")
    player_count: int = Field(default=0, ge=0, alias="playerCount")

    model_config = ConfigDict(populate_by_name=True)
