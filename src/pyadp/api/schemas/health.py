from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .players import FormatCacheStatus


class MemorySnapshot(BaseModel):
    max_rss_kb: int | None = Field(default=None, alias="maxRssKb")
    gc_objects: int = Field(..., alias="gcObjects")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    status: str = "healthy"
    uptime: float
    memory: MemorySnapshot
    cache_status: Dict[str, FormatCacheStatus] = Field(..., alias="cacheStatus")

    model_config = ConfigDict(populate_by_name=True)
