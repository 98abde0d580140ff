"""Command-line interface for league rankings and available players."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys
from pathlib import Path
from typing import Sequence

from pyleague.api.schemas import AvailableResponse, RankedTeamResponse
from pyleague.config import MissingLeagueIdError, Settings, configure_logging, load_env_file, resolve_league_id
from pyleague.ingest import UpstreamError
from pyleague.models import AvailablePlayer, RankedTeam
from pyleague.service import compute_available, compute_rankings


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--league-id", default=None, help="Sleeper league id (overrides LEAGUE_ID)")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding QB.csv ... DST.csv")
    parser.add_argument("--profile", type=Path, default=None, help="JSON source profile overriding file names")
    parser.add_argument("--json", action="store_true", help="Print the API JSON payload instead of a table")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Projected-points views for a Sleeper league")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rankings = subparsers.add_parser("rankings", help="Rank league teams by total projected points")
    _add_source_arguments(rankings)

    available = subparsers.add_parser("available", help="List projected players no team has rostered")
    _add_source_arguments(available)
    available.add_argument("--limit", type=int, default=None, help="Only print the top N players")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    serve.add_argument("--port", type=int, default=None, help="Port to bind (defaults to PORT or 3000)")

    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if getattr(args, "data_dir", None) is not None:
        overrides["data_dir"] = args.data_dir
    if getattr(args, "profile", None) is not None:
        overrides["profile_path"] = args.profile
    if getattr(args, "port", None) is not None:
        overrides["port"] = args.port
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _print_rankings(ranked: Sequence[RankedTeam]) -> None:
    for team in ranked:
        print(f"{team.rank:>3}. {team.team_name:<30} {team.total_projected:8.2f}")
        for player in team.players:
            marker = "*" if player.is_starter else " "
            print(f"      {marker} {player.position:<5} {player.name:<28} {player.projected_points:7.2f}")


def _print_available(players: Sequence[AvailablePlayer]) -> None:
    for player in players:
        print(f"{player.position:<4} {player.player_name:<30} {player.team_code:<4} {player.projected_points:7.2f}")


def _serve(settings: Settings, host: str) -> None:
    import uvicorn

    from pyleague.api import create_app

    uvicorn.run(create_app(settings), host=host, port=settings.port, log_level=settings.log_level.lower())


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    load_env_file()
    settings = _settings_from_args(args)
    configure_logging(settings.log_level)

    if args.command == "serve":
        _serve(settings, args.host)
        return 0

    try:
        league_id = resolve_league_id(args.league_id, settings)
    except MissingLeagueIdError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.command == "rankings":
            ranked = asyncio.run(compute_rankings(league_id, settings))
            if args.json:
                payload = [RankedTeamResponse.from_ranked(team).model_dump(by_alias=True) for team in ranked]
                print(json.dumps(payload, indent=2))
            else:
                _print_rankings(ranked)
        else:
            players = asyncio.run(compute_available(league_id, settings))
            if args.limit is not None:
                players = players[: max(0, args.limit)]
            if args.json:
                print(json.dumps(AvailableResponse.from_players(players).model_dump(), indent=2))
            else:
                _print_available(players)
    except UpstreamError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
