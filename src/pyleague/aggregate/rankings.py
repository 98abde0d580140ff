"""Rank league teams by total projected points."""

from __future__ import annotations

from typing import List, Sequence

from pyleague.matching import MatchingEngine
from pyleague.models import RankedTeam, TeamRoster


def rank_teams(rosters: Sequence[TeamRoster], engine: MatchingEngine) -> List[RankedTeam]:
    """Match every roster and rank by summed projection.

    Unresolved players count as zero. Equal totals keep roster fetch order.
    """

    scored = []
    for roster in rosters:
        players = engine.match_roster(roster)
        total = sum(player.projected_points for player in players)
        scored.append((roster.team_name, total, players))

    ordered = sorted(scored, key=lambda item: item[1], reverse=True)
    return [
        RankedTeam(rank=rank, team_name=team_name, total_projected=total, players=players)
        for rank, (team_name, total, players) in enumerate(ordered, start=1)
    ]
