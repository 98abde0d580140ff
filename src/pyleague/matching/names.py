"""Name canonicalization and the known-alias table used for identity matching."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple


_PUNCTUATION = re.compile(r"[.']")
_SUFFIX_TOKENS = re.compile(r"\b(?:jr|sr|ii|iii|iv)\b")
_WHITESPACE = re.compile(r"\s+")
_DEFENSE_SUFFIX = re.compile(r"\s+d/st$", re.IGNORECASE)


def normalize_name(name: str) -> str:
    """Return the comparison key for a raw player name.

    ``"D'Andre Swift Jr."`` becomes ``"dandre swift"`` and ``"Ja-Marr Chase"``
    becomes ``"ja marr chase"``. Applying it twice yields the same key.
    """

    lowered = name.lower()
    cleaned = _PUNCTUATION.sub("", lowered).replace("-", " ")
    cleaned = _SUFFIX_TOKENS.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


AliasTable = Mapping[str, str]


def build_alias_table(pairs: Iterable[Tuple[str, str]]) -> AliasTable:
    """Build a read-only alias table holding both directions of every pair."""

    table: dict[str, str] = {}
    for left, right in pairs:
        left_key = normalize_name(left)
        right_key = normalize_name(right)
        if not left_key or not right_key or left_key == right_key:
            raise ValueError(f"invalid alias pair: {left!r} / {right!r}")
        for key, value in ((left_key, right_key), (right_key, left_key)):
            existing = table.get(key)
            if existing is not None and existing != value:
                raise ValueError(f"conflicting aliases for {key!r}: {existing!r} and {value!r}")
            table[key] = value
    return MappingProxyType(table)


# Spellings that differ between the league provider and the projection sheets.
NAME_ALIASES: AliasTable = build_alias_table(
    [
        ("josh palmer", "joshua palmer"),
        ("hollywood brown", "marquise brown"),
        ("chig okonkwo", "chigoziem okonkwo"),
        ("cam ward", "cameron ward"),
    ]
)


def alias_for(key: str, aliases: AliasTable = NAME_ALIASES) -> Optional[str]:
    """Single-hop alias lookup for an already-normalized key."""

    return aliases.get(key)


def name_keys(name: str, aliases: AliasTable = NAME_ALIASES) -> tuple[str, ...]:
    key = normalize_name(name)
    alias = alias_for(key, aliases)
    return (key, alias) if alias else (key,)


def franchise_name(defense_name: str) -> str:
    """Lower-cased franchise part of a team-defense projection name.

    ``"Denver D/ST"`` gives ``"denver"``; names without the suffix are kept whole.
    """

    return _DEFENSE_SUFFIX.sub("", defense_name.strip()).lower()


def defense_matches(display_name: str, defense_name: str, team_code: str = "") -> bool:
    """Whether a rostered defense display name refers to a projected defense."""

    roster_name = display_name.lower()
    franchise = franchise_name(defense_name)
    if franchise and franchise in roster_name:
        return True
    code = team_code.strip().lower()
    return bool(code) and code in roster_name
