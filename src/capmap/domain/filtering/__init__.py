"""Artifact-visibility filters.

Pure functions over read-only snapshots: nothing here performs I/O, holds
state between calls or mutates its inputs.
"""

from __future__ import annotations

from .artifacts import ArtifactPredicate, FilterableArtifacts
from .creator import filter_by_creator
from .domain import (
    UNASSIGNED_DOMAIN,
    DomainFilterData,
    compute_visible_artifact_ids,
    filter_by_domain,
    reachable_ids,
    unassigned_ids,
    visibility_for_domains,
)
from .hierarchy import (
    CapabilityCycleError,
    expand_descendants,
    find_parent_cycle,
    preserve_capability_hierarchy,
)
from .pipeline import FilterSelection, apply_filters
from .visibility import VisibilitySet

__all__ = [
    "UNASSIGNED_DOMAIN",
    "ArtifactPredicate",
    "CapabilityCycleError",
    "DomainFilterData",
    "FilterSelection",
    "FilterableArtifacts",
    "VisibilitySet",
    "apply_filters",
    "compute_visible_artifact_ids",
    "expand_descendants",
    "filter_by_creator",
    "filter_by_domain",
    "find_parent_cycle",
    "preserve_capability_hierarchy",
    "reachable_ids",
    "unassigned_ids",
    "visibility_for_domains",
]
