"""Scoring formats and the provider pages that publish their ADP."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from pyadp.errors import InvalidFormat


@dataclass(frozen=True)
class FormatSource:
    name: str
    url: str
    aliases: Tuple[str, ...]


_FORMAT_SOURCES: Dict[str, FormatSource] = {
    "PPR": FormatSource(
        name="PPR",
        url="https://www.fantasypros.com/nfl/adp/ppr-overall.php",
        aliases=("ppr",),
    ),
    "Half PPR": FormatSource(
        name="Half PPR",
        url="https://www.fantasypros.com/nfl/adp/half-point-ppr-overall.php",
        aliases=("halfppr", "half"),
    ),
    "Standard": FormatSource(
        name="Standard",
        url="https://www.fantasypros.com/nfl/adp/overall.php",
        aliases=("standard", "std"),
    ),
    "Superflex": FormatSource(
        name="Superflex",
        url="https://www.fantasypros.com/nfl/adp/superflex-overall.php",
        aliases=("superflex", "sf"),
    ),
}

SUPPORTED_FORMATS: Tuple[str, ...] = tuple(_FORMAT_SOURCES)
DEFAULT_FORMAT = "Half PPR"


def _alias_token(value: str) -> str:
    return re.sub(r"[^a-z]", "", value.lower())


def _build_alias_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for source in _FORMAT_SOURCES.values():
        for alias in source.aliases:
            lookup.setdefault(_alias_token(alias), source.name)
    return lookup


_ALIAS_LOOKUP = _build_alias_lookup()


def iter_sources() -> Iterable[FormatSource]:
    """Return an iterator of all configured format sources."""

    return _FORMAT_SOURCES.values()


def normalize_format(value: str) -> str:
    """Resolve a user-supplied alias ("half-ppr", "SF", ...) to a canonical format."""

    canonical = _ALIAS_LOOKUP.get(_alias_token(value))
    if canonical is None:
        raise InvalidFormat(value, SUPPORTED_FORMATS)
    return canonical


def get_source(fmt: str) -> FormatSource:
    """Fetch the source for a canonical format name, raising InvalidFormat if missing."""

    if fmt not in _FORMAT_SOURCES:
        raise InvalidFormat(fmt, SUPPORTED_FORMATS)
    return _FORMAT_SOURCES[fmt]

