"""REST API serving cached ADP rankings."""

from __future__ import annotations

import asyncio
import gc
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import partial
from typing import Any, AsyncIterator, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pyadp.api.schemas import (
    ErrorResponse,
    FormatCacheStatus,
    HealthResponse,
    InvalidFormatResponse,
    MemorySnapshot,
    PlayersResponse,
)
from pyadp.cache import AdpCache
from pyadp.config import DEFAULT_FORMAT, SUPPORTED_FORMATS, Settings, normalize_format
from pyadp.errors import AdpError, InvalidFormat
from pyadp.ingest import fetch_adp_data


logger = logging.getLogger("uvicorn.error")

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)
_PROCESS_STARTED = time.monotonic()

ROUTES = {
    "/api/players/:format": "Get ADP data for scoring format (PPR, Half PPR, Standard, Superflex)",
    "/api/players": f"Get ADP data (defaults to {DEFAULT_FORMAT})",
    "/health": "Service uptime, memory and per-format cache status",
}


def build_cache(settings: Settings) -> AdpCache:
    return AdpCache(
        partial(fetch_adp_data, settings=settings),
        ttl=settings.cache_ttl,
        max_stale=settings.max_stale,
    )


async def prewarm(cache: AdpCache, fmt: str) -> None:
    """Load one format in the background; failures are logged only."""

    try:
        players = await cache.get_data(fmt)
    except Exception:
        logger.exception("Pre-warm fetch for %s failed", fmt)
        return
    logger.info("Pre-warmed %s with %d players", fmt, len(players))


def _memory_snapshot() -> MemorySnapshot:
    try:
        import resource
    except ImportError:  # pragma: no cover - non-POSIX platforms
        max_rss = None
    else:
        max_rss = int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
    return MemorySnapshot(max_rss_kb=max_rss, gc_objects=len(gc.get_objects()))


def get_cache(request: Request) -> AdpCache:
    return request.app.state.adp_cache


async def _players_response(cache: AdpCache, fmt: str) -> PlayersResponse | JSONResponse:
    try:
        players = await cache.get_data(fmt)
    except Exception as exc:
        if not isinstance(exc, AdpError):
            logger.exception("Unexpected error loading %s data", fmt)
        body = ErrorResponse(error="Failed to fetch ADP data", message=str(exc))
        return JSONResponse(status_code=500, content=body.model_dump())
    last_updated = cache.last_updated(fmt) or _EPOCH
    return PlayersResponse(
        format=fmt,
        players=list(players),
        last_updated=last_updated.isoformat(),
        count=len(players),
    )


def create_app(cache: Optional[AdpCache] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    adp_cache = cache if cache is not None else build_cache(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        task: Optional[asyncio.Task] = None
        if settings.prewarm_format:
            task = asyncio.create_task(prewarm(adp_cache, settings.prewarm_format))
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()

    app = FastAPI(title="pyadp", lifespan=lifespan)
    app.state.adp_cache = adp_cache
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidFormat)
    async def invalid_format_handler(request: Request, exc: InvalidFormat) -> JSONResponse:
        body = InvalidFormatResponse(supported_formats=list(exc.supported_formats))
        return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))

    @app.get("/")
    async def index() -> dict[str, Any]:
        return {
            "message": "Fantasy Football ADP API",
            "endpoints": ROUTES,
            "supportedFormats": list(SUPPORTED_FORMATS),
            "status": "running",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health(cache: AdpCache = Depends(get_cache)) -> HealthResponse:
        return HealthResponse(
            uptime=time.monotonic() - _PROCESS_STARTED,
            memory=_memory_snapshot(),
            cache_status={
                fmt: FormatCacheStatus.model_validate(status)
                for fmt, status in cache.status().items()
            },
        )

    @app.get("/api/players", response_model=PlayersResponse)
    async def default_players(cache: AdpCache = Depends(get_cache)) -> PlayersResponse | JSONResponse:
        return await _players_response(cache, DEFAULT_FORMAT)

    @app.get("/api/players/{format}", response_model=PlayersResponse)
    async def players_for_format(format: str, cache: AdpCache = Depends(get_cache)) -> PlayersResponse | JSONResponse:
        return await _players_response(cache, normalize_format(format))

    return app
