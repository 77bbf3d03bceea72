import csv
import json
from io import StringIO

import pytest

from pyadp import cli
from pyadp.errors import FetchError
from pyadp.models import PlayerRecord


def _players() -> list[PlayerRecord]:
    return [
        PlayerRecord.from_row(
            overall_rank=1, name="Josh Allen", team="BUF", position="QB", position_rank=1, adp=20.1
        ),
        PlayerRecord.from_row(
            overall_rank=2, name="Travis Kelce", team="KC", position="TE", position_rank=1, adp=30.4
        ),
    ]


def test_render_players_csv():
    rendered = cli.render_players(_players(), "csv")
    rows = list(csv.DictReader(StringIO(rendered)))
    assert [row["name"] for row in rows] == ["Josh Allen", "Travis Kelce"]
    assert rows[1]["positionRank"] == "1"
    assert "id" not in rows[0]


def test_fetch_invalid_format_exits_2(capsys):
    assert cli.main(["fetch", "dynasty"]) == 2
    assert "Unsupported format" in capsys.readouterr().err


def test_fetch_writes_json(tmp_path, monkeypatch):
    async def fake_fetch(fmt, *, settings=None, client=None):
        assert fmt == "Superflex"
        return _players()

    monkeypatch.setattr(cli, "fetch_adp_data", fake_fetch)
    output = tmp_path / "sf.json"

    assert cli.main(["fetch", "sf", "--output", str(output)]) == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload[0]["overallRank"] == 1
    assert payload[1]["team"] == "KC"


def test_fetch_failure_exits_1(monkeypatch, capsys):
    async def failing_fetch(fmt, *, settings=None, client=None):
        raise FetchError("connection refused")

    monkeypatch.setattr(cli, "fetch_adp_data", failing_fetch)

    assert cli.main(["fetch", "ppr"]) == 1
    assert "connection refused" in capsys.readouterr().err


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        cli.main(["bogus"])
