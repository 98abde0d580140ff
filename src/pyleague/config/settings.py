"""Process configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEFAULT_LEAGUE_ID = "1257482024906657792"
SLEEPER_BASE_URL = "https://api.sleeper.app/v1"

_LEAGUE_ID_ENV = "LEAGUE_ID"
_DEFAULT_LEAGUE_ID_ENV = "PYLEAGUE_DEFAULT_LEAGUE_ID"
_DATA_DIR_ENV = "PYLEAGUE_DATA_DIR"
_PROFILE_ENV = "PYLEAGUE_PROFILE"
_SLEEPER_URL_ENV = "PYLEAGUE_SLEEPER_URL"
_TIMEOUT_ENV = "PYLEAGUE_HTTP_TIMEOUT"
_LOG_LEVEL_ENV = "LOG_LEVEL"
_PORT_ENV = "PORT"

_TIMEOUT_DEFAULT = 30.0
_PORT_DEFAULT = 3000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class MissingLeagueIdError(ValueError):
    """No league id was supplied, configured, or defaulted."""

    def __init__(self, message: str = "Missing LEAGUE_ID"):
        super().__init__(message)


def _env_str(environ: Mapping[str, str], name: str, default: str | None = None) -> str | None:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip()


def _env_float(environ: Mapping[str, str], name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(environ: Mapping[str, str], name: str, default: int, *, min_value: int | None = None) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    league_id: str = ""
    default_league_id: str = DEFAULT_LEAGUE_ID
    data_dir: Path = Path("data")
    profile_path: Optional[Path] = None
    sleeper_base_url: str = SLEEPER_BASE_URL
    http_timeout: float = _TIMEOUT_DEFAULT
    log_level: str = "INFO"
    port: int = _PORT_DEFAULT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        profile = _env_str(env, _PROFILE_ENV)
        return cls(
            league_id=_env_str(env, _LEAGUE_ID_ENV, "") or "",
            default_league_id=_env_str(env, _DEFAULT_LEAGUE_ID_ENV, DEFAULT_LEAGUE_ID) or "",
            data_dir=Path(_env_str(env, _DATA_DIR_ENV) or "data"),
            profile_path=Path(profile) if profile else None,
            sleeper_base_url=_env_str(env, _SLEEPER_URL_ENV) or SLEEPER_BASE_URL,
            http_timeout=_env_float(env, _TIMEOUT_ENV, _TIMEOUT_DEFAULT, clamp_min=1.0),
            log_level=(_env_str(env, _LOG_LEVEL_ENV) or "INFO").upper(),
            port=_env_int(env, _PORT_ENV, _PORT_DEFAULT, min_value=1),
        )


def resolve_league_id(explicit: str | None, settings: Settings) -> str:
    """Per-request value, then the configured league, then the built-in default."""

    for candidate in (explicit, settings.league_id, settings.default_league_id):
        value = (candidate or "").strip()
        if value:
            return value
    raise MissingLeagueIdError()


def load_env_file(path: Path | None = None) -> bool:
    """Load ``.env`` from the working directory; real environment variables win."""

    return load_dotenv(path or Path.cwd() / ".env", override=False)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
