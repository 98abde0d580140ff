"""Entity resolution between projection sheets and league rosters."""

from .engine import MatchingEngine
from .index import NameIndex
from .names import (
    NAME_ALIASES,
    AliasTable,
    alias_for,
    build_alias_table,
    defense_matches,
    franchise_name,
    name_keys,
    normalize_name,
)

__all__ = [
    "NAME_ALIASES",
    "AliasTable",
    "MatchingEngine",
    "NameIndex",
    "alias_for",
    "build_alias_table",
    "defense_matches",
    "franchise_name",
    "name_keys",
    "normalize_name",
]
