"""REST API for league rankings and available players."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from pyleague import __version__
from pyleague.api.schemas import AvailableResponse, RankedTeamResponse
from pyleague.config import MissingLeagueIdError, Settings, load_env_file, resolve_league_id
from pyleague.ingest import SleeperClient, UpstreamError
from pyleague.service import compute_available, compute_rankings


logger = logging.getLogger("uvicorn.error")


def _league_id_or_400(league_id: str | None, settings: Settings) -> str:
    try:
        return resolve_league_id(league_id, settings)
    except MissingLeagueIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def create_app(settings: Settings | None = None, *, sleeper_client: SleeperClient | None = None) -> FastAPI:
    if settings is None:
        load_env_file()
        settings = Settings.from_env()
    app = FastAPI(title="pyleague", version=__version__)
    app.state.settings = settings
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"], allow_headers=["*"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/rankings", response_model=list[RankedTeamResponse])
    async def rankings(league_id: str | None = Query(None, alias="leagueId")) -> list[RankedTeamResponse]:
        resolved = _league_id_or_400(league_id, settings)
        try:
            ranked = await compute_rankings(resolved, settings, client=sleeper_client)
        except UpstreamError:
            logger.exception("Failed to compute rankings for league %s", resolved)
            raise HTTPException(status_code=500, detail="Failed to compute rankings") from None
        return [RankedTeamResponse.from_ranked(team) for team in ranked]

    @app.get("/api/available", response_model=AvailableResponse)
    async def available(league_id: str | None = Query(None, alias="leagueId")) -> AvailableResponse:
        resolved = _league_id_or_400(league_id, settings)
        try:
            players = await compute_available(resolved, settings, client=sleeper_client)
        except UpstreamError:
            logger.exception("Failed to compute available players for league %s", resolved)
            raise HTTPException(status_code=500, detail="Failed to compute available players") from None
        return AvailableResponse.from_players(players)

    return app
