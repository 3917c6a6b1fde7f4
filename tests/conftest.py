from __future__ import annotations

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def snapshot_path() -> Path:
    return DATA_DIR / "catalogue_snapshot.json"


@pytest.fixture
def snapshot_document(snapshot_path: Path) -> dict[str, object]:
    with snapshot_path.open(encoding="utf-8") as handle:
        return json.load(handle)
