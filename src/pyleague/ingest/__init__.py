"""Input adapters that normalize projection sheets and league rosters."""

from .projections import (
    DEFAULT_SOURCE_FILES,
    ProjectionCatalog,
    ProjectionSourceError,
    UpstreamError,
    load_projection_catalog,
    load_projection_csv,
    parse_projection_rows,
)
from .sleeper import LeagueSnapshot, RosterFetchError, SleeperClient, build_team_rosters

__all__ = [
    "DEFAULT_SOURCE_FILES",
    "LeagueSnapshot",
    "ProjectionCatalog",
    "ProjectionSourceError",
    "RosterFetchError",
    "SleeperClient",
    "UpstreamError",
    "build_team_rosters",
    "load_projection_catalog",
    "load_projection_csv",
    "parse_projection_rows",
]
