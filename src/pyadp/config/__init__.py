"""Configuration helpers for scoring formats and runtime settings."""

from .formats import (
    DEFAULT_FORMAT,
    SUPPORTED_FORMATS,
    FormatSource,
    get_source,
    iter_sources,
    normalize_format,
)
from .settings import Settings

__all__ = [
    "DEFAULT_FORMAT",
    "SUPPORTED_FORMATS",
    "FormatSource",
    "Settings",
    "get_source",
    "iter_sources",
    "normalize_format",
]
