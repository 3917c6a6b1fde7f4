"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from capmap.adapters.snapshot import load_snapshot
from capmap.config import get_snapshot_config
from capmap.domain.filtering import (
    FilterSelection,
    apply_filters,
    compute_visible_artifact_ids,
    unassigned_ids,
)

if TYPE_CHECKING:
    from pathlib import Path

    from capmap.adapters.snapshot import CatalogueSnapshot
    from capmap.domain.filtering import FilterableArtifacts


log = getLogger(__name__)


def load_catalogue(path: str | Path | None = None) -> CatalogueSnapshot:
    """Load the catalogue snapshot from ``path`` or ``CAPMAP_SNAPSHOT_PATH``."""

    config = get_snapshot_config(path=path)
    snapshot_path = config.resolve_path()
    log.info("Loading catalogue snapshot from %s", snapshot_path)
    return load_snapshot(snapshot_path)


def filter_catalogue(
    selection: FilterSelection,
    *,
    snapshot: CatalogueSnapshot | None = None,
    snapshot_path: str | Path | None = None,
    preserve_hierarchy: bool = True,
) -> FilterableArtifacts:
    """Apply ``selection`` to a catalogue snapshot."""

    effective_snapshot = snapshot or load_catalogue(snapshot_path)
    log.info(
        "Filtering catalogue: creators=%s, domains=%s, preserve_hierarchy=%s",
        sorted(selection.creator_ids),
        sorted(selection.domain_ids),
        preserve_hierarchy,
    )

    result = apply_filters(
        effective_snapshot.artifacts,
        selection,
        effective_snapshot.domain_data,
        effective_snapshot.creator_map,
        preserve_hierarchy=preserve_hierarchy,
    )

    log.info(
        f"Finished filtering: visible={result.count()}, "
        f"total={effective_snapshot.artifacts.count()}"
    )
    return result


def visible_artifact_ids(
    selection: FilterSelection,
    *,
    snapshot: CatalogueSnapshot | None = None,
    snapshot_path: str | Path | None = None,
) -> frozenset[str]:
    """Return the ids visible under the domain part of ``selection``."""

    effective_snapshot = snapshot or load_catalogue(snapshot_path)
    return compute_visible_artifact_ids(selection.domain_ids, effective_snapshot.domain_data)


def unassigned_artifact_ids(
    *,
    snapshot: CatalogueSnapshot | None = None,
    snapshot_path: str | Path | None = None,
) -> frozenset[str]:
    """Return the known ids that belong to no business domain."""

    effective_snapshot = snapshot or load_catalogue(snapshot_path)
    result = unassigned_ids(effective_snapshot.domain_data)
    log.info("Found %s unassigned artifacts", len(result))
    return result
