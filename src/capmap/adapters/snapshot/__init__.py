"""Catalogue snapshot adapter."""

from __future__ import annotations

from .loader import SnapshotLoadError, load_snapshot, parse_snapshot
from .schema import CatalogueSnapshotPayload
from .translator import CatalogueSnapshot, translate_snapshot

__all__ = [
    "CatalogueSnapshot",
    "CatalogueSnapshotPayload",
    "SnapshotLoadError",
    "load_snapshot",
    "parse_snapshot",
    "translate_snapshot",
]
