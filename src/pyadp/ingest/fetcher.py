"""Download provider ADP pages and turn them into records."""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from pyadp.config import Settings, get_source
from pyadp.errors import FetchError, NoDataFound
from pyadp.models import PlayerRecord

from .html import parse_players_from_html


logger = logging.getLogger("uvicorn.error")


async def _download(client: httpx.AsyncClient, url: str, settings: Settings) -> str:
    try:
        resp = await client.get(
            url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.fetch_timeout,
            follow_redirects=True,
        )
        resp.raise_for_status()
    except httpx.TimeoutException as exc:
        raise FetchError(f"Timed out after {settings.fetch_timeout:g}s fetching {url}") from exc
    except httpx.HTTPStatusError as exc:
        raise FetchError(f"Request failed with status code {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(str(exc) or exc.__class__.__name__) from exc
    return resp.text


async def fetch_adp_data(
    fmt: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> List[PlayerRecord]:
    """Fetch and parse the ADP table for a canonical scoring format.

    Raises InvalidFormat for unknown formats, FetchError when the provider
    is unreachable, and NoDataFound when the page yields no player rows.
    """

    source = get_source(fmt)
    settings = settings or Settings()

    logger.info("Fetching %s data from %s", fmt, source.url)
    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                html = await _download(owned_client, source.url, settings)
        else:
            html = await _download(client, source.url, settings)

        players = parse_players_from_html(html)
        if not players:
            raise NoDataFound("No players found in response")
    except (FetchError, NoDataFound) as exc:
        logger.error("Error fetching %s data: %s", fmt, exc)
        raise

    logger.info("Successfully parsed %d players for %s", len(players), fmt)
    return players
