import httpx
import pytest

from pyleague.ingest import RosterFetchError, SleeperClient, build_team_rosters


def _users() -> list[dict]:
    return [
        {"user_id": "u1", "display_name": "alice", "metadata": {"team_name": "Alice's Aces"}},
        {"user_id": "u2", "display_name": "bob", "metadata": {}},
    ]


def _rosters() -> list[dict]:
    return [
        {"roster_id": 1, "owner_id": "u1", "players": ["100", "200", "999"], "starters": ["100"]},
        {"roster_id": 2, "owner_id": "u2", "players": ["300", "DEN"], "starters": None},
        {"roster_id": 3, "owner_id": None, "players": None, "starters": []},
    ]


def _players() -> dict[str, dict]:
    return {
        "100": {"first_name": "Josh", "last_name": "Allen", "position": "QB"},
        "200": {"first_name": "Joshua", "last_name": "Palmer", "position": "WR"},
        "300": {"full_name": "Mystery Man", "position": None},
        "DEN": {"first_name": "Denver", "last_name": "Broncos", "position": "DEF"},
    }


def test_build_team_rosters_joins_users_rosters_and_players():
    teams = build_team_rosters(_users(), _rosters(), _players())

    assert [team.team_name for team in teams] == ["Alice's Aces", "bob", "Team 3"]
    assert [team.roster_id for team in teams] == ["1", "2", "3"]

    alice = teams[0]
    assert [entry.display_name for entry in alice.entries] == ["Josh Allen", "Joshua Palmer"]
    assert [entry.is_starter for entry in alice.entries] == [True, False]
    assert alice.entries[0].external_id == "100"


def test_build_team_rosters_positions_and_name_fallbacks():
    teams = build_team_rosters(_users(), _rosters(), _players())

    bob = teams[1]
    assert [(e.display_name, e.position) for e in bob.entries] == [("Mystery Man", "FLEX"), ("Denver Broncos", "DST")]
    assert teams[2].entries == []


def test_build_team_rosters_falls_back_to_player_id_for_name():
    teams = build_team_rosters([], [{"roster_id": 7, "players": ["42"]}], {"42": {"position": "K"}})

    assert teams[0].team_name == "Team 7"
    assert teams[0].entries[0].display_name == "42"


def _handler(payloads: dict[str, object], seen: list[str] | None = None):
    def handle(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request.url.path)
        for suffix, payload in payloads.items():
            if request.url.path.endswith(suffix):
                if isinstance(payload, httpx.Response):
                    return payload
                if payload is None:
                    return httpx.Response(200, content=b"null", headers={"content-type": "application/json"})
                return httpx.Response(200, json=payload)
        return httpx.Response(404, json={"error": "not found"})

    return handle


def _league_payloads() -> dict[str, object]:
    return {"/users": _users(), "/rosters": _rosters(), "/players/nfl": _players()}


@pytest.mark.anyio
async def test_fetch_league_calls_all_endpoints():
    seen: list[str] = []
    transport = httpx.MockTransport(_handler(_league_payloads(), seen))
    async with httpx.AsyncClient(transport=transport) as http:
        client = SleeperClient(base_url="https://sleeper.test/v1/", client=http)
        snapshot = await client.fetch_league("L1")

    assert sorted(seen) == ["/v1/league/L1/rosters", "/v1/league/L1/users", "/v1/players/nfl"]
    assert snapshot.league_id == "L1"
    assert len(snapshot.rosters) == 3
    assert [e.display_name for e in snapshot.entries] == ["Josh Allen", "Joshua Palmer", "Mystery Man", "Denver Broncos"]


@pytest.mark.anyio
async def test_fetch_league_http_error_raises_roster_fetch_error():
    payloads = _league_payloads()
    payloads["/rosters"] = httpx.Response(500, text="boom")
    transport = httpx.MockTransport(_handler(payloads))
    async with httpx.AsyncClient(transport=transport) as http:
        client = SleeperClient(client=http)
        with pytest.raises(RosterFetchError):
            await client.fetch_league("L1")


@pytest.mark.anyio
async def test_fetch_league_invalid_json_raises_roster_fetch_error():
    payloads = _league_payloads()
    payloads["/players/nfl"] = httpx.Response(200, text="<html>not json</html>")
    transport = httpx.MockTransport(_handler(payloads))
    async with httpx.AsyncClient(transport=transport) as http:
        client = SleeperClient(client=http)
        with pytest.raises(RosterFetchError):
            await client.fetch_league("L1")


@pytest.mark.anyio
async def test_fetch_league_unexpected_shape_raises_roster_fetch_error():
    payloads = _league_payloads()
    payloads["/users"] = {"not": "a list"}
    transport = httpx.MockTransport(_handler(payloads))
    async with httpx.AsyncClient(transport=transport) as http:
        client = SleeperClient(client=http)
        with pytest.raises(RosterFetchError):
            await client.fetch_league("L1")


@pytest.mark.anyio
async def test_fetch_league_tolerates_null_bodies():
    payloads = {"/users": None, "/rosters": None, "/players/nfl": None}
    transport = httpx.MockTransport(_handler(payloads))
    async with httpx.AsyncClient(transport=transport) as http:
        snapshot = await SleeperClient(client=http).fetch_league("L1")

    assert snapshot.rosters == []
