"""In-memory ADP cache with stale-on-failure fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Dict, Iterable, Optional, Sequence, Tuple

from pyadp.config import SUPPORTED_FORMATS, get_source
from pyadp.config.settings import DEFAULT_CACHE_TTL
from pyadp.models import PlayerRecord


logger = logging.getLogger("uvicorn.error")

Fetcher = Callable[[str], Awaitable[Sequence[PlayerRecord]]]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FormatCache:
    """Last successful fetch for one format.

    ``players`` and ``fetched_at`` are either both set or both ``None``;
    slots are replaced wholesale, never mutated field by field.
    """

    players: Optional[Tuple[PlayerRecord, ...]] = None
    fetched_at: Optional[datetime] = None

    @property
    def cached(self) -> bool:
        return self.players is not None

    def age(self, now: datetime) -> Optional[timedelta]:
        if self.fetched_at is None:
            return None
        return now - self.fetched_at

    def status(self) -> dict:
        return {
            "cached": self.cached,
            "lastFetch": self.fetched_at.isoformat() if self.fetched_at else None,
            "playerCount": len(self.players) if self.players is not None else 0,
        }


_EMPTY = FormatCache()


class AdpCache:
    """One slot per scoring format, refreshed lazily on read.

    There is no lock around a slot. Concurrent requests that find the same
    format stale will each call the fetcher and the last one to finish wins.
    Fetches are idempotent reads of the provider, so the only cost is the
    duplicated request.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        ttl: float | timedelta = DEFAULT_CACHE_TTL,
        max_stale: float | timedelta | None = None,
        clock: Clock = utc_now,
        formats: Iterable[str] = SUPPORTED_FORMATS,
    ):
        self._fetcher = fetcher
        self.ttl = ttl if isinstance(ttl, timedelta) else timedelta(seconds=ttl)
        if max_stale is None or isinstance(max_stale, timedelta):
            self.max_stale = max_stale
        else:
            self.max_stale = timedelta(seconds=max_stale)
        self._clock = clock
        self._slots: Dict[str, FormatCache] = {fmt: _EMPTY for fmt in formats}

    @property
    def formats(self) -> Tuple[str, ...]:
        return tuple(self._slots)

    def slot(self, fmt: str) -> FormatCache:
        if fmt not in self._slots:
            get_source(fmt)
        return self._slots.get(fmt, _EMPTY)

    def last_updated(self, fmt: str) -> Optional[datetime]:
        return self.slot(fmt).fetched_at

    def status(self) -> dict[str, dict]:
        return {fmt: slot.status() for fmt, slot in self._slots.items()}

    def clear(self) -> None:
        for fmt in self._slots:
            self._slots[fmt] = _EMPTY

    def _is_fresh(self, slot: FormatCache, now: datetime) -> bool:
        age = slot.age(now)
        return slot.cached and age is not None and age < self.ttl

    def _may_serve_stale(self, slot: FormatCache, now: datetime) -> bool:
        if not slot.cached:
            return False
        if self.max_stale is None:
            return True
        age = slot.age(now)
        return age is not None and age <= self.ttl + self.max_stale

    async def get_data(self, fmt: str) -> Tuple[PlayerRecord, ...]:
        """Return players for ``fmt``, fetching when the slot is empty or expired."""

        slot = self.slot(fmt)
        now = self._clock()
        if self._is_fresh(slot, now):
            logger.info("Returning cached %s data", fmt)
            return slot.players  # type: ignore[return-value]

        try:
            players = tuple(await self._fetcher(fmt))
        except Exception as exc:
            # Re-read: a concurrent request may have refreshed the slot meanwhile.
            current = self._slots.get(fmt, _EMPTY)
            if self._may_serve_stale(current, self._clock()):
                logger.warning("Fetch failed, returning stale %s data: %s", fmt, exc)
                return current.players  # type: ignore[return-value]
            if current.cached:
                logger.warning("Stale %s data exceeds the staleness ceiling; not serving it", fmt)
            raise

        self._slots[fmt] = FormatCache(players=players, fetched_at=now)
        return players
