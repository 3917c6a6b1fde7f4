"""Filtering artifacts by the user who created them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from capmap.domain.model import Artifact, ArtifactId, CreatorId

    from .artifacts import FilterableArtifacts

log = logging.getLogger(__name__)


def filter_by_creator(
    artifacts: FilterableArtifacts,
    selected_creator_ids: Collection[CreatorId],
    creator_map: Mapping[ArtifactId, CreatorId],
) -> FilterableArtifacts:
    """Keep artifacts created by any of the selected creators.

    An empty selection disables the filter and returns ``artifacts`` itself.
    Artifacts without an entry in ``creator_map`` never match an active filter.
    """

    if not selected_creator_ids:
        return artifacts

    selected = frozenset(selected_creator_ids)

    def created_by_selected(artifact: Artifact) -> bool:
        creator = creator_map.get(artifact.id)
        return creator is not None and creator in selected

    result = artifacts.select(created_by_selected)
    log.debug(
        "Creator filter kept %s of %s artifacts for %s creator(s)",
        result.count(),
        artifacts.count(),
        len(selected),
    )
    return result
