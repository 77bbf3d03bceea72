"""Pydantic models for API I/O."""

from .health import HealthResponse, MemorySnapshot
from .players import ErrorResponse, FormatCacheStatus, InvalidFormatResponse, PlayersResponse

__all__ = [
    "ErrorResponse",
    "FormatCacheStatus",
    "HealthResponse",
    "InvalidFormatResponse",
    "MemorySnapshot",
    "PlayersResponse",
]
