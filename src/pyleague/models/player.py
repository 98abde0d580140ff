"""Canonical player models shared across ingestion, matching and aggregation."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Position = Literal["QB", "RB", "WR", "TE", "K", "DST"]

PROJECTION_POSITIONS: tuple[Position, ...] = ("QB", "RB", "WR", "TE", "K", "DST")
DEFENSE_POSITIONS = frozenset({"DEF", "DST"})


def is_defense(position: str) -> bool:
    return position in DEFENSE_POSITIONS


class ProjectionRecord(BaseModel):
    """One projected player from a single position source."""

    player_name: str = Field(..., min_length=1)
    position: Position
    projected_points: float = Field(..., ge=0.0)
    team_code: str = ""

    model_config = ConfigDict(frozen=True)


class RosterEntry(BaseModel):
    """Rostered player as reported by the league provider."""

    external_id: str
    display_name: str
    position: str = "FLEX"
    is_starter: bool = False

    model_config = ConfigDict(frozen=True)


class TeamRoster(BaseModel):
    roster_id: str
    team_name: str
    entries: List[RosterEntry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class MatchedPlayer(BaseModel):
    """Roster entry resolved against the projection catalog (0 points when unresolved)."""

    name: str
    position: str
    projected_points: float = 0.0
    is_starter: bool = False

    model_config = ConfigDict(frozen=True)


class RankedTeam(BaseModel):
    rank: int = Field(..., ge=1)
    team_name: str
    total_projected: float
    players: List[MatchedPlayer]

    model_config = ConfigDict(frozen=True)


class AvailablePlayer(BaseModel):
    player_name: str
    position: Position
    projected_points: float
    team_code: str = ""

    model_config = ConfigDict(frozen=True)
