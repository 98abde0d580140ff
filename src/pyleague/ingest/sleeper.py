"""Sleeper league roster source."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

import httpx

from pyleague.config.settings import SLEEPER_BASE_URL
from pyleague.ingest.projections import UpstreamError
from pyleague.models import RosterEntry, TeamRoster


logger = logging.getLogger(__name__)


class RosterFetchError(UpstreamError):
    """A Sleeper call failed or returned an unusable body."""


@dataclass(frozen=True)
class LeagueSnapshot:
    league_id: str
    rosters: List[TeamRoster]

    @property
    def entries(self) -> List[RosterEntry]:
        return [entry for roster in self.rosters for entry in roster.entries]


def _display_name(player: Mapping[str, Any], player_id: str) -> str:
    parts = [str(player[key]) for key in ("first_name", "last_name") if player.get(key)]
    joined = " ".join(parts).strip()
    return joined or str(player.get("full_name") or "") or str(player.get("last_name") or "") or player_id


def _position(player: Mapping[str, Any]) -> str:
    position = player.get("position")
    if position == "DEF":
        return "DST"
    return str(position) if position else "FLEX"


def _team_name(owner: Mapping[str, Any] | None, roster_id: str) -> str:
    owner = owner or {}
    metadata = owner.get("metadata") or {}
    return metadata.get("team_name") or owner.get("display_name") or f"Team {roster_id}"


def build_team_rosters(
    users: Sequence[Mapping[str, Any]],
    rosters: Sequence[Mapping[str, Any]],
    players: Mapping[str, Mapping[str, Any]],
) -> List[TeamRoster]:
    """Join league users, rosters and the player directory into team rosters.

    Player ids missing from the directory are skipped.
    """

    users_by_id = {str(user.get("user_id")): user for user in users}
    teams: List[TeamRoster] = []
    for roster in rosters:
        roster_id = str(roster.get("roster_id"))
        owner = users_by_id.get(str(roster.get("owner_id")))
        starters = {str(pid) for pid in roster.get("starters") or []}
        entries: List[RosterEntry] = []
        skipped = 0
        for pid in (str(value) for value in roster.get("players") or []):
            player = players.get(pid)
            if not player:
                skipped += 1
                continue
            entries.append(
                RosterEntry(
                    external_id=pid,
                    display_name=_display_name(player, pid),
                    position=_position(player),
                    is_starter=pid in starters,
                )
            )
        if skipped:
            logger.debug("Roster %s: %d player ids missing from directory", roster_id, skipped)
        teams.append(TeamRoster(roster_id=roster_id, team_name=_team_name(owner, roster_id), entries=entries))
    return teams


class SleeperClient:
    """Thin async wrapper around the public Sleeper REST API."""

    def __init__(
        self,
        *,
        base_url: str = SLEEPER_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as exc:
            raise RosterFetchError(f"GET {url} failed: {exc}") from exc
        except ValueError as exc:
            raise RosterFetchError(f"GET {url} returned invalid JSON") from exc

    async def _fetch(self, client: httpx.AsyncClient, league_id: str) -> LeagueSnapshot:
        users, rosters, players = await asyncio.gather(
            self._get_json(client, f"league/{league_id}/users"),
            self._get_json(client, f"league/{league_id}/rosters"),
            self._get_json(client, "players/nfl"),
        )
        if not isinstance(users or [], list) or not isinstance(rosters or [], list):
            raise RosterFetchError(f"league {league_id}: unexpected users/rosters payload")
        if not isinstance(players or {}, dict):
            raise RosterFetchError("players/nfl: unexpected payload")
        try:
            teams = build_team_rosters(users or [], rosters or [], players or {})
        except (AttributeError, TypeError, ValueError) as exc:
            raise RosterFetchError(f"league {league_id}: malformed roster data: {exc}") from exc
        return LeagueSnapshot(league_id=league_id, rosters=teams)

    async def fetch_league(self, league_id: str) -> LeagueSnapshot:
        if self._client is not None:
            return await self._fetch(self._client, league_id)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch(client, league_id)
