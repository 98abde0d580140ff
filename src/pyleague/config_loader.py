"""Persist and load projection source profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from pyleague.ingest.projections import DEFAULT_SOURCE_FILES
from pyleague.models import PROJECTION_POSITIONS


@dataclass
class SourceProfile:
    """Where the per-position projection files live."""

    source_files: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SOURCE_FILES))
    data_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        unknown = sorted(set(self.source_files) - set(PROJECTION_POSITIONS))
        if unknown:
            raise ValueError(f"unknown projection positions in profile: {', '.join(unknown)}")

    @classmethod
    def load(cls, path: Path) -> "SourceProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("source profile must be a JSON object")
        overrides = data.get("source_files") or {}
        if not isinstance(overrides, dict):
            raise ValueError("source_files must map positions to file names")
        files = dict(DEFAULT_SOURCE_FILES)
        files.update({str(key).upper(): str(value) for key, value in overrides.items()})
        data_dir = data.get("data_dir")
        if data_dir:
            data_dir = Path(data_dir)
            if not data_dir.is_absolute():
                data_dir = path.parent / data_dir
        return cls(source_files=files, data_dir=data_dir)

    def save(self, path: Path) -> None:
        payload = {
            "source_files": self.source_files,
            "data_dir": str(self.data_dir) if self.data_dir else None,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
