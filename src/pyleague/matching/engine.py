"""Resolve rostered players to projection records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from pyleague.matching.index import NameIndex
from pyleague.matching.names import NAME_ALIASES, AliasTable, alias_for, defense_matches, normalize_name
from pyleague.models import MatchedPlayer, ProjectionRecord, RosterEntry, TeamRoster, is_defense


logger = logging.getLogger(__name__)


def _first_at_position(candidates: Sequence[ProjectionRecord], position: str) -> Optional[ProjectionRecord]:
    for candidate in candidates:
        if candidate.position == position:
            return candidate
    return None


class MatchingEngine:
    """Applies the lookup policy for one request's catalog.

    Resolution order: primary key at the entry's position, alias key at the
    entry's position, any position under the primary key, then (defenses
    only) a franchise-name / team-code scan over the defense records. The
    position-agnostic step can credit a same-named player at another position.
    """

    def __init__(
        self,
        index: NameIndex,
        defenses: Iterable[ProjectionRecord] = (),
        *,
        aliases: AliasTable = NAME_ALIASES,
    ):
        self.index = index
        self.defenses = tuple(defenses)
        self.aliases = aliases
        self.unresolved_entries: List[RosterEntry] = []

    def resolve(self, entry: RosterEntry) -> Optional[ProjectionRecord]:
        key = normalize_name(entry.display_name)
        candidates = self.index.lookup(key)
        match = _first_at_position(candidates, entry.position)
        if match is not None:
            return match

        alias = alias_for(key, self.aliases)
        if alias:
            match = _first_at_position(self.index.lookup(alias), entry.position)
            if match is not None:
                return match

        if candidates:
            if candidates[0].position != entry.position:
                logger.debug(
                    "Matched %s (%s) to %s projection by name only",
                    entry.display_name,
                    entry.position,
                    candidates[0].position,
                )
            return candidates[0]

        if is_defense(entry.position):
            for record in self.defenses:
                if defense_matches(entry.display_name, record.player_name, record.team_code):
                    return record
        return None

    def match(self, entry: RosterEntry) -> MatchedPlayer:
        record = self.resolve(entry)
        if record is None:
            self.unresolved_entries.append(entry)
        return MatchedPlayer(
            name=entry.display_name,
            position=entry.position,
            projected_points=record.projected_points if record is not None else 0.0,
            is_starter=entry.is_starter,
        )

    def match_roster(self, team: TeamRoster) -> List[MatchedPlayer]:
        return [self.match(entry) for entry in team.entries]
