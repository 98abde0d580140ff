from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel

from pyleague.models import AvailablePlayer


class AvailablePlayerResponse(BaseModel):
    player: str
    position: str
    projected: float
    team: str


class AvailableResponse(BaseModel):
    count: int
    available: List[AvailablePlayerResponse]

    @classmethod
    def from_players(cls, players: Sequence[AvailablePlayer]) -> "AvailableResponse":
        return cls(
            count=len(players),
            available=[
                AvailablePlayerResponse(
                    player=player.player_name,
                    position=player.position,
                    projected=player.projected_points,
                    team=player.team_code,
                )
                for player in players
            ],
        )
