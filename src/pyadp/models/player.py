"""Canonical player model emitted by the HTML extractor."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_RISK = "Medium"


class PlayerRecord(BaseModel):
    """One ranked player row from an ADP table."""

    id: str = Field(..., min_length=1)
    name: str
    team: str
    position: str
    overall_rank: int = Field(..., gt=0, alias="overallRank")
    position_rank: int = Field(..., gt=0, alias="positionRank")
    adp: float = Field(..., gt=0.0)
    risk: str = DEFAULT_RISK
    notes: str = ""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_row(
        cls,
        *,
        overall_rank: int,
        name: str,
        team: str,
        position: str,
        position_rank: int,
        adp: float,
    ) -> "PlayerRecord":
        return cls(
            id=f"adp_{overall_rank}",
            name=name,
            team=team,
            position=position,
            overall_rank=overall_rank,
            position_rank=position_rank,
            adp=adp,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
