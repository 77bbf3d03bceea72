"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .formats import DEFAULT_FORMAT, normalize_format
from pyadp.errors import InvalidFormat

logger = logging.getLogger("uvicorn.error")

_PORT_ENV = "PORT"
_HOST_ENV = "PYADP_HOST"
_CACHE_TTL_ENV = "PYADP_CACHE_TTL"
_MAX_STALE_ENV = "PYADP_MAX_STALE"
_FETCH_TIMEOUT_ENV = "PYADP_FETCH_TIMEOUT"
_USER_AGENT_ENV = "PYADP_USER_AGENT"
_PREWARM_ENV = "PYADP_PREWARM_FORMAT"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_CACHE_TTL = 60 * 60.0
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return max(0.0, float(raw))
    except ValueError:
        logger.warning("Invalid float for %s: %s; leaving unset", name, raw)
        return None


def _env_prewarm_format() -> Optional[str]:
    raw = os.getenv(_PREWARM_ENV)
    if raw is None:
        return DEFAULT_FORMAT
    if raw.strip() == "":
        return None
    try:
        return normalize_format(raw)
    except InvalidFormat:
        logger.warning("Invalid format for %s: %s; using default %s", _PREWARM_ENV, raw, DEFAULT_FORMAT)
        return DEFAULT_FORMAT


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    cache_ttl: float = DEFAULT_CACHE_TTL
    max_stale: Optional[float] = None
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    prewarm_format: Optional[str] = DEFAULT_FORMAT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=_env_int(_PORT_ENV, DEFAULT_PORT, min_value=0),
            host=os.getenv(_HOST_ENV) or DEFAULT_HOST,
            cache_ttl=_env_float(_CACHE_TTL_ENV, DEFAULT_CACHE_TTL, clamp_min=0.0),
            max_stale=_env_optional_float(_MAX_STALE_ENV),
            fetch_timeout=_env_float(_FETCH_TIMEOUT_ENV, DEFAULT_FETCH_TIMEOUT, clamp_min=0.1),
            user_agent=os.getenv(_USER_AGENT_ENV) or DEFAULT_USER_AGENT,
            prewarm_format=_env_prewarm_format(),
        )
