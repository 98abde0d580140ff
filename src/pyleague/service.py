"""Per-request orchestration: fetch inputs concurrently, then match and aggregate."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from pyleague.aggregate import find_available, rank_teams
from pyleague.config import Settings
from pyleague.config_loader import SourceProfile
from pyleague.ingest import (
    LeagueSnapshot,
    ProjectionCatalog,
    ProjectionSourceError,
    SleeperClient,
    load_projection_catalog,
)
from pyleague.matching import NAME_ALIASES, AliasTable, MatchingEngine, NameIndex
from pyleague.models import AvailablePlayer, RankedTeam


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestInputs:
    catalog: ProjectionCatalog
    league: LeagueSnapshot


def _source_profile(settings: Settings) -> SourceProfile:
    if settings.profile_path is None:
        return SourceProfile()
    try:
        return SourceProfile.load(settings.profile_path)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        raise ProjectionSourceError(settings.profile_path, f"invalid source profile: {exc}") from exc


def _sleeper_client(settings: Settings) -> SleeperClient:
    return SleeperClient(base_url=settings.sleeper_base_url, timeout=settings.http_timeout)


async def gather_inputs(
    league_id: str,
    settings: Settings,
    *,
    client: SleeperClient | None = None,
) -> RequestInputs:
    """Load projections and the league roster state; both must succeed."""

    profile = await asyncio.to_thread(_source_profile, settings)
    data_dir: Path = profile.data_dir or settings.data_dir
    client = client or _sleeper_client(settings)
    catalog, league = await asyncio.gather(
        load_projection_catalog(data_dir, source_files=profile.source_files),
        client.fetch_league(league_id),
    )
    return RequestInputs(catalog=catalog, league=league)


def build_engine(catalog: ProjectionCatalog, *, aliases: AliasTable = NAME_ALIASES) -> MatchingEngine:
    index = NameIndex.build(catalog, aliases=aliases)
    return MatchingEngine(index, catalog.defenses(), aliases=aliases)


def rankings_from_inputs(inputs: RequestInputs, *, aliases: AliasTable = NAME_ALIASES) -> List[RankedTeam]:
    engine = build_engine(inputs.catalog, aliases=aliases)
    ranked = rank_teams(inputs.league.rosters, engine)
    logger.info(
        "League %s: ranked %d teams against %d projections (%d unresolved roster entries)",
        inputs.league.league_id,
        len(ranked),
        len(inputs.catalog),
        len(engine.unresolved_entries),
    )
    return ranked


def available_from_inputs(inputs: RequestInputs, *, aliases: AliasTable = NAME_ALIASES) -> List[AvailablePlayer]:
    available = find_available(inputs.catalog, inputs.league.entries, aliases=aliases)
    logger.info(
        "League %s: %d of %d projected players available",
        inputs.league.league_id,
        len(available),
        len(inputs.catalog),
    )
    return available


async def compute_rankings(
    league_id: str,
    settings: Settings,
    *,
    client: SleeperClient | None = None,
) -> List[RankedTeam]:
    inputs = await gather_inputs(league_id, settings, client=client)
    return rankings_from_inputs(inputs)


async def compute_available(
    league_id: str,
    settings: Settings,
    *,
    client: SleeperClient | None = None,
) -> List[AvailablePlayer]:
    inputs = await gather_inputs(league_id, settings, client=client)
    return available_from_inputs(inputs)
