"""Provider adapters that fetch and normalize ADP tables."""

from .fetcher import fetch_adp_data
from .html import parse_players_from_html, parse_row

__all__ = [
    "fetch_adp_data",
    "parse_players_from_html",
    "parse_row",
]
