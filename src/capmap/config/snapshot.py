"""Catalogue snapshot location."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

SNAPSHOT_PATH_ENV_VAR: Final[str] = "CAPMAP_SNAPSHOT_PATH"


@dataclass(frozen=True, slots=True)
class SnapshotConfig:
    path: Path

    def resolve_path(self) -> Path:
        return self.path.expanduser().resolve()


def get_snapshot_config(*, path: str | Path | None = None) -> SnapshotConfig:
    """Use ``path`` if given, otherwise the required ``CAPMAP_SNAPSHOT_PATH``."""

    if path is not None:
        return SnapshotConfig(path=Path(path))
    return SnapshotConfig(path=Path(require_env_var(SNAPSHOT_PATH_ENV_VAR)))
