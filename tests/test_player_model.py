import pytest
from pydantic import ValidationError

from pyadp.models import PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord.from_row(
        overall_rank=3,
        name="Justin Jefferson",
        team="MIN",
        position="WR",
        position_rank=1,
        adp=4.2,
    )

    assert record.id == "adp_3"
    assert record.risk == "Medium"
    assert record.notes == ""

    with pytest.raises((TypeError, ValidationError)):
        record.name = "Someone Else"  # type: ignore[misc]


def test_player_record_payload_uses_camel_case():
    record = PlayerRecord.from_row(
        overall_rank=10,
        name="Bijan Robinson",
        team="ATL",
        position="RB",
        position_rank=4,
        adp=9.8,
    )

    payload = record.to_payload()
    assert payload["overallRank"] == 10
    assert payload["positionRank"] == 4
    assert "overall_rank" not in payload
    assert PlayerRecord.model_validate(payload) == record


@pytest.mark.parametrize("field, value", [("overall_rank", 0), ("position_rank", -1), ("adp", 0.0)])
def test_player_record_rejects_non_positive_values(field, value):
    data = dict(
        id="adp_1",
        name="X",
        team="KC",
        position="QB",
        overall_rank=1,
        position_rank=1,
        adp=1.5,
    )
    data[field] = value
    with pytest.raises(ValidationError):
        PlayerRecord(**data)
