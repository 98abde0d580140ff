"""Projected players that no team in the league has rostered."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from pyleague.matching import NAME_ALIASES, AliasTable, defense_matches, name_keys
from pyleague.models import AvailablePlayer, ProjectionRecord, RosterEntry, is_defense


@dataclass
class RosteredIdentities:
    """Name keys per position plus raw defense names taken from every roster."""

    names_by_position: Dict[str, Set[str]] = field(default_factory=dict)
    defense_names: List[str] = field(default_factory=list)

    @classmethod
    def collect(cls, entries: Iterable[RosterEntry], *, aliases: AliasTable = NAME_ALIASES) -> "RosteredIdentities":
        identities = cls()
        for entry in entries:
            keys = identities.names_by_position.setdefault(entry.position, set())
            keys.update(name_keys(entry.display_name, aliases))
            if is_defense(entry.position):
                identities.defense_names.append(entry.display_name.lower())
        return identities

    def is_rostered(self, record: ProjectionRecord, *, aliases: AliasTable = NAME_ALIASES) -> bool:
        if is_defense(record.position):
            return any(
                defense_matches(name, record.player_name, record.team_code) for name in self.defense_names
            )
        taken = self.names_by_position.get(record.position)
        if not taken:
            return False
        return any(key in taken for key in name_keys(record.player_name, aliases))


def find_available(
    records: Iterable[ProjectionRecord],
    entries: Iterable[RosterEntry],
    *,
    aliases: AliasTable = NAME_ALIASES,
) -> List[AvailablePlayer]:
    """Unrostered projections, highest projection first (ties keep catalog order)."""

    identities = RosteredIdentities.collect(entries, aliases=aliases)
    available = [
        AvailablePlayer(
            player_name=record.player_name,
            position=record.position,
            projected_points=record.projected_points,
            team_code=record.team_code,
        )
        for record in records
        if not identities.is_rostered(record, aliases=aliases)
    ]
    available.sort(key=lambda player: player.projected_points, reverse=True)
    return available
