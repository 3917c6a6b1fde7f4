"""Read catalogue snapshot files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import CatalogueSnapshotPayload
from .translator import translate_snapshot

if TYPE_CHECKING:
    from pathlib import Path

    from .translator import CatalogueSnapshot

log = logging.getLogger(__name__)


class SnapshotLoadError(RuntimeError):
    """Raised when a snapshot file cannot be read or does not match the schema."""


def parse_snapshot(document: object) -> CatalogueSnapshot:
    """Validate an already-decoded JSON document and translate it."""

    try:
        payload = CatalogueSnapshotPayload.model_validate(document)
    except ValidationError as exc:
        raise SnapshotLoadError(f"Invalid catalogue snapshot: {exc}") from exc
    return translate_snapshot(payload)


def load_snapshot(path: Path) -> CatalogueSnapshot:
    """Load and translate the snapshot stored at ``path``."""

    try:
        with path.open(encoding="utf-8") as handle:
            document = json.load(handle)
    except OSError as exc:
        raise SnapshotLoadError(f"Cannot read catalogue snapshot {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SnapshotLoadError(f"Catalogue snapshot {path} is not valid JSON: {exc}") from exc

    snapshot = parse_snapshot(document)
    log.debug(
        "Loaded snapshot %s: %s artifacts, %s domains, %s relationships",
        path,
        snapshot.artifacts.count(),
        len(snapshot.domain_data.all_domain_ids),
        len(snapshot.domain_data.origin_relationships),
    )
    return snapshot
