from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from pyleague.models import RankedTeam


class RankedPlayerResponse(BaseModel):
    name: str
    position: str
    projected: float
    is_starter: bool = Field(alias="isStarter")

    model_config = ConfigDict(populate_by_name=True)


class RankedTeamResponse(BaseModel):
    rank: int
    team_name: str = Field(alias="teamName")
    total_projected: float = Field(alias="totalProjected")
    players: List[RankedPlayerResponse]

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_ranked(cls, team: RankedTeam) -> "RankedTeamResponse":
        return cls(
            rank=team.rank,
            team_name=team.team_name,
            total_projected=team.total_projected,
            players=[
                RankedPlayerResponse(
                    name=player.name,
                    position=player.position,
                    projected=player.projected_points,
                    is_starter=player.is_starter,
                )
                for player in team.players
            ],
        )
