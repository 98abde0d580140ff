"""Helpers to load per-position projection CSVs into a catalog."""

from __future__ import annotations

import asyncio
import csv
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from pyleague.models import PROJECTION_POSITIONS, Position, ProjectionRecord


logger = logging.getLogger(__name__)

POINTS_COLUMNS: tuple[str, ...] = ("fantasy", "FPTS", "points")

DEFAULT_SOURCE_FILES: Dict[str, str] = {position: f"{position}.csv" for position in PROJECTION_POSITIONS}


class UpstreamError(RuntimeError):
    """An input the request depends on could not be read."""


class ProjectionSourceError(UpstreamError):
    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


def _parse_points(row: Mapping[str, Optional[str]]) -> Optional[float]:
    raw = None
    for column in POINTS_COLUMNS:
        value = (row.get(column) or "").strip()
        if value:
            raw = value
            break
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return max(0.0, value)


def parse_projection_rows(
    rows: Iterable[Mapping[str, Optional[str]]],
    position: Position,
) -> List[ProjectionRecord]:
    """Turn raw CSV rows into records, last row winning per player name.

    Rows without a player name or a numeric points value are dropped.
    """

    records: Dict[str, ProjectionRecord] = {}
    dropped = 0
    for row in rows:
        player = (row.get("player") or "").strip()
        points = _parse_points(row)
        if not player or points is None:
            dropped += 1
            continue
        records[player] = ProjectionRecord(
            player_name=player,
            position=position,
            projected_points=points,
            team_code=(row.get("team") or "").strip(),
        )
    if dropped:
        logger.debug("Dropped %d malformed %s projection rows", dropped, position)
    return list(records.values())


def load_projection_csv(path: Path, position: Position) -> List[ProjectionRecord]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            return parse_projection_rows(csv.DictReader(f), position)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise ProjectionSourceError(path, str(exc)) from exc


@dataclass(frozen=True)
class ProjectionCatalog:
    """Projection records grouped by position in canonical load order."""

    by_position: Mapping[str, Sequence[ProjectionRecord]] = field(default_factory=dict)

    def __iter__(self) -> Iterator[ProjectionRecord]:
        for position in PROJECTION_POSITIONS:
            yield from self.by_position.get(position, ())

    def __len__(self) -> int:
        return sum(len(records) for records in self.by_position.values())

    def records(self) -> List[ProjectionRecord]:
        return list(self)

    def defenses(self) -> Sequence[ProjectionRecord]:
        return tuple(self.by_position.get("DST", ()))

    @classmethod
    def from_records(cls, records: Iterable[ProjectionRecord]) -> "ProjectionCatalog":
        grouped: Dict[str, List[ProjectionRecord]] = {}
        for record in records:
            grouped.setdefault(record.position, []).append(record)
        return cls({position: tuple(grouped.get(position, ())) for position in PROJECTION_POSITIONS})


async def load_projection_catalog(
    data_dir: Path,
    *,
    source_files: Mapping[str, str] | None = None,
) -> ProjectionCatalog:
    """Read all six position sources concurrently; any failure aborts the load."""

    files = dict(DEFAULT_SOURCE_FILES)
    if source_files:
        files.update(source_files)
    results = await asyncio.gather(
        *(
            asyncio.to_thread(load_projection_csv, data_dir / files[position], position)
            for position in PROJECTION_POSITIONS
        )
    )
    catalog = ProjectionCatalog(
        {position: tuple(records) for position, records in zip(PROJECTION_POSITIONS, results)}
    )
    logger.debug("Loaded %d projections from %s", len(catalog), data_dir)
    return catalog
