"""Exception hierarchy shared by the fetcher, cache and API layers."""

from __future__ import annotations

from typing import Sequence


class AdpError(RuntimeError):
    """Base class for failures surfaced while producing ADP data."""


class FetchError(AdpError):
    """Raised when the provider cannot be reached or answers with an error."""


class NoDataFound(AdpError):
    """Raised when a response was received but no player rows were extracted."""


class InvalidFormat(AdpError, ValueError):
    """Raised when a scoring format alias does not resolve to a known format."""

    def __init__(self, value: str, supported_formats: Sequence[str]):
        self.value = value
        self.supported_formats = tuple(supported_formats)
        super().__init__(
            f"Unsupported format: {value!r} (expected one of {', '.join(self.supported_formats)})"
        )
