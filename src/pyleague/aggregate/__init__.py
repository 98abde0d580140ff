"""League-level views built from matched rosters."""

from .availability import RosteredIdentities, find_available
from .rankings import rank_teams

__all__ = ["RosteredIdentities", "find_available", "rank_teams"]
