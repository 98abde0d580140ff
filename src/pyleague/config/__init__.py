"""Configuration helpers for league and data-source settings."""

from .settings import (
    DEFAULT_LEAGUE_ID,
    MissingLeagueIdError,
    Settings,
    configure_logging,
    load_env_file,
    resolve_league_id,
)

__all__ = [
    "DEFAULT_LEAGUE_ID",
    "MissingLeagueIdError",
    "Settings",
    "configure_logging",
    "load_env_file",
    "resolve_league_id",
]
