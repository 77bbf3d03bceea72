"""Best-effort extraction of ADP rows from provider HTML."""

from __future__ import annotations

import json
import logging
import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup

from pyadp.models import PlayerRecord


logger = logging.getLogger(__name__)

MAX_OVERALL_RANK = 500
_DIAGNOSTIC_SAMPLE = 5

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SCRIPT_ARRAY = re.compile(r"var\s+\w+\s*=\s*(\[.*?\]);")
_NAME_TEAM = re.compile(r"(.+?)\s+([A-Z]{2,4})(?:\s*\(\d+\))?")
_POSITION_RANK = re.compile(r"([A-Z]+)(\d+)")
_LOOSE_PLAYER_TEXT = re.compile(r"\b\d+\b.*\b[A-Z]{2,3}\b.*\b\d+\.\d+\b")


def _to_int(digits: str) -> Optional[int]:
    # Oversized digit runs exceed the int() conversion limit.
    try:
        return int(digits)
    except ValueError:
        return None


def _leading_int(text: str) -> Optional[int]:
    """Parse the integer prefix of ``text`` ("12.", "7 (+2)" -> 12, 7)."""

    match = _INT_PREFIX.match(text)
    return _to_int(match.group(1)) if match else None


def _leading_float(text: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def parse_row(cells: Sequence[str]) -> Optional[PlayerRecord]:
    """Convert one table row's cell text into a record, or ``None`` if it isn't a player row.

    Expected layout: rank | "Name TEAM (bye)" | "POS<n>" | ADP | ...
    """

    if len(cells) < 4:
        return None

    rank = _leading_int(cells[0])
    adp = _leading_float(cells[3])
    if rank is None or not 0 < rank < MAX_OVERALL_RANK:
        return None
    if adp is None or not adp > 0:
        return None

    logger.debug("Found potential player row: %s", " | ".join(cells))

    name_team = _NAME_TEAM.fullmatch(cells[1])
    if name_team is None:
        return None
    position_rank = _POSITION_RANK.fullmatch(cells[2])
    if position_rank is None:
        return None

    name, team = name_team.groups()
    position, raw_pos_rank = position_rank.groups()
    pos_rank = _to_int(raw_pos_rank)
    if pos_rank is None or pos_rank <= 0:
        return None

    return PlayerRecord.from_row(
        overall_rank=rank,
        name=name.strip(),
        team=team.strip(),
        position=position,
        position_rank=pos_rank,
        adp=adp,
    )


def _scan_scripts(soup: BeautifulSoup) -> None:
    # Detection only: embedded arrays are logged but never turned into records.
    for script in soup.find_all("script"):
        content = script.string or script.get_text()
        if not content or "player" not in content or "adp" not in content:
            continue
        logger.debug("Found potential player data in script tag")
        match = _SCRIPT_ARRAY.search(content)
        if match is None:
            continue
        try:
            data = json.loads(match.group(1))
        except ValueError:
            continue
        logger.info("Parsed embedded script array with %d items", len(data))
        break


def _scan_tables(soup: BeautifulSoup) -> List[PlayerRecord]:
    players: List[PlayerRecord] = []
    tables = soup.find_all("table")
    logger.debug("Found %d tables", len(tables))

    for table_index, table in enumerate(tables, start=1):
        rows = table.find_all("tr")
        logger.debug("Table %d has %d rows", table_index, len(rows))
        for row in rows:
            cells = [cell.get_text().strip() for cell in row.find_all(["td", "th"])]
            record = parse_row(cells)
            if record is None:
                continue
            players.append(record)
            logger.debug(
                "Added player: %s (%s%d) - %s",
                record.name,
                record.position,
                record.position_rank,
                record.team,
            )
    return players


def _log_loose_matches(soup: BeautifulSoup) -> None:
    logger.info("No players found in tables, trying alternative selectors")
    matches = [element for element in soup.find_all(True) if _LOOSE_PLAYER_TEXT.search(element.get_text())]
    logger.info("Found %d elements with potential player data", len(matches))
    for index, element in enumerate(matches[:_DIAGNOSTIC_SAMPLE], start=1):
        logger.info("Potential player element %d: %s", index, element.get_text().strip()[:100])


def parse_players_from_html(html: str) -> List[PlayerRecord]:
    """Extract player records in document order.

    Tries embedded script data first (diagnostic only), then every table row,
    then a loose text scan that only logs what it sees. Returns an empty list
    when nothing matched; callers decide whether that is an error.
    """

    soup = BeautifulSoup(html, "html.parser")

    _scan_scripts(soup)
    players = _scan_tables(soup)
    if not players:
        _log_loose_matches(soup)

    logger.info("Total players parsed: %d", len(players))
    return players
