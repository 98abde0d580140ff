"""Pydantic models for API I/O."""

from .available import AvailablePlayerResponse, AvailableResponse
from .rankings import RankedPlayerResponse, RankedTeamResponse

__all__ = [
    "AvailablePlayerResponse",
    "AvailableResponse",
    "RankedPlayerResponse",
    "RankedTeamResponse",
]
