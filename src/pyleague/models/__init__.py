"""Data model for projections, rosters and their reconciled views."""

from .player import (
    DEFENSE_POSITIONS,
    PROJECTION_POSITIONS,
    AvailablePlayer,
    MatchedPlayer,
    Position,
    ProjectionRecord,
    RankedTeam,
    RosterEntry,
    TeamRoster,
    is_defense,
)

__all__ = [
    "DEFENSE_POSITIONS",
    "PROJECTION_POSITIONS",
    "AvailablePlayer",
    "MatchedPlayer",
    "Position",
    "ProjectionRecord",
    "RankedTeam",
    "RosterEntry",
    "TeamRoster",
    "is_defense",
]
