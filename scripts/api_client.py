"""Lightweight REST client for the pyleague API."""

from __future__ import annotations

import argparse

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyleague REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("--league-id", default=None, help="League id to query (server default if omitted)")
    parser.add_argument("--available", action="store_true", help="Fetch available players instead of rankings")
    parser.add_argument("--top", type=int, default=10, help="Number of rows to print")
    args = parser.parse_args()

    params = {"leagueId": args.league_id} if args.league_id else {}
    path = "/api/available" if args.available else "/api/rankings"

    with httpx.Client(base_url=args.base_url, timeout=60.0) as client:
        resp = client.get(path, params=params)
        if resp.status_code == 400:
            raise SystemExit(f"bad request: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()

    if args.available:
        print(f"{payload['count']} available players")
        for player in payload["available"][: args.top]:
            print(f"{player['position']:<4} {player['player']:<30} {player['team']:<4} {player['projected']:7.2f}")
        return

    for team in payload[: args.top]:
        print(f"{team['rank']:>3}. {team['teamName']:<30} {team['totalProjected']:8.2f}")
    if not payload:
        print("league has no rosters")


if __name__ == "__main__":
    main()
