import pytest

from pyadp.config import (
    DEFAULT_FORMAT,
    SUPPORTED_FORMATS,
    Settings,
    get_source,
    iter_sources,
    normalize_format,
)
from pyadp.errors import InvalidFormat


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("ppr", "PPR"),
        ("PPR", "PPR"),
        ("halfppr", "Half PPR"),
        ("Half-PPR", "Half PPR"),
        ("half", "Half PPR"),
        ("Half PPR", "Half PPR"),
        ("standard", "Standard"),
        ("STD", "Standard"),
        ("superflex", "Superflex"),
        ("SF", "Superflex"),
        ("super_flex", "Superflex"),
        ("half0.5ppr", "Half PPR"),
    ],
)
def test_normalize_format_aliases(alias, expected):
    assert normalize_format(alias) == expected
    assert normalize_format(alias) in SUPPORTED_FORMATS


@pytest.mark.parametrize("alias", ["", "dynasty", "2qb", "pprr", "full ppr"])
def test_normalize_format_rejects_unknown(alias):
    with pytest.raises(InvalidFormat) as excinfo:
        normalize_format(alias)
    assert excinfo.value.supported_formats == SUPPORTED_FORMATS
    assert isinstance(excinfo.value, ValueError)


def test_sources_cover_every_format():
    names = [source.name for source in iter_sources()]
    assert names == list(SUPPORTED_FORMATS) == ["PPR", "Half PPR", "Standard", "Superflex"]
    assert get_source("Half PPR").url.endswith("half-point-ppr-overall.php")
    assert DEFAULT_FORMAT == "Half PPR"


def test_get_source_missing_raises():
    with pytest.raises(InvalidFormat):
        get_source("ppr")


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "PYADP_CACHE_TTL", "PYADP_MAX_STALE", "PYADP_FETCH_TIMEOUT", "PYADP_PREWARM_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.port == 3000
    assert settings.cache_ttl == 3600
    assert settings.max_stale is None
    assert settings.fetch_timeout == 10
    assert settings.prewarm_format == "Half PPR"
    assert "Mozilla" in settings.user_agent


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PYADP_CACHE_TTL", "120")
    monkeypatch.setenv("PYADP_MAX_STALE", "86400")
    monkeypatch.setenv("PYADP_PREWARM_FORMAT", "sf")

    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.cache_ttl == 120
    assert settings.max_stale == 86400
    assert settings.prewarm_format == "Superflex"


def test_settings_ignore_invalid_values(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("PYADP_CACHE_TTL", "soon")
    monkeypatch.setenv("PYADP_MAX_STALE", "forever")
    monkeypatch.setenv("PYADP_PREWARM_FORMAT", "dynasty")

    settings = Settings.from_env()
    assert settings.port == 3000
    assert settings.cache_ttl == 3600
    assert settings.max_stale is None
    assert settings.prewarm_format == "Half PPR"


def test_settings_blank_prewarm_disables(monkeypatch):
    monkeypatch.setenv("PYADP_PREWARM_FORMAT", "")
    assert Settings.from_env().prewarm_format is None
