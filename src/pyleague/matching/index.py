"""Lookup from normalized (and aliased) name keys to projection candidates."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from pyleague.matching.names import NAME_ALIASES, AliasTable, name_keys
from pyleague.models import ProjectionRecord


class NameIndex:
    """Candidates per name key, kept in catalog load order."""

    def __init__(self, entries: Dict[str, Tuple[ProjectionRecord, ...]]):
        self._entries = entries

    @classmethod
    def build(
        cls,
        records: Iterable[ProjectionRecord],
        *,
        aliases: AliasTable = NAME_ALIASES,
    ) -> "NameIndex":
        buckets: Dict[str, List[ProjectionRecord]] = {}
        for record in records:
            for key in name_keys(record.player_name, aliases):
                buckets.setdefault(key, []).append(record)
        return cls({key: tuple(candidates) for key, candidates in buckets.items()})

    def lookup(self, key: str) -> Tuple[ProjectionRecord, ...]:
        return self._entries.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
