"""Combined creator, domain and hierarchy filtering for one selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .creator import filter_by_creator
from .domain import UNASSIGNED_DOMAIN, filter_by_domain
from .hierarchy import preserve_capability_hierarchy

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from capmap.domain.model import ArtifactId, CreatorId

    from .artifacts import FilterableArtifacts
    from .domain import DomainFilterData

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterSelection:
    """Selected creator and domain filters; an empty set disables that filter."""

    creator_ids: frozenset[CreatorId] = field(default_factory=frozenset["CreatorId"])
    domain_ids: frozenset[str] = field(default_factory=frozenset[str])

    @classmethod
    def build(
        cls,
        *,
        creator_ids: Iterable[CreatorId] = (),
        domain_ids: Iterable[str] = (),
        include_unassigned: bool = False,
    ) -> FilterSelection:
        domains = set(domain_ids)
        if include_unassigned:
            domains.add(UNASSIGNED_DOMAIN)
        return cls(creator_ids=frozenset(creator_ids), domain_ids=frozenset(domains))

    @property
    def is_active(self) -> bool:
        return bool(self.creator_ids or self.domain_ids)


def apply_filters(
    artifacts: FilterableArtifacts,
    selection: FilterSelection,
    data: DomainFilterData,
    creator_map: Mapping[ArtifactId, CreatorId],
    *,
    preserve_hierarchy: bool = True,
) -> FilterableArtifacts:
    """Run the creator filter, then the domain filter, then restore capability ancestors.

    Ancestors are looked up in the unfiltered ``artifacts.capabilities`` so a
    capability hidden by a filter can still reappear as structural parent.
    """

    if not selection.is_active:
        return artifacts

    result = filter_by_creator(artifacts, selection.creator_ids, creator_map)
    result = filter_by_domain(result, selection.domain_ids, data)
    if preserve_hierarchy:
        result = replace(
            result,
            capabilities=preserve_capability_hierarchy(result.capabilities, artifacts.capabilities),
        )

    log.debug(
        "Filter selection %s kept %s of %s artifacts",
        selection,
        result.count(),
        artifacts.count(),
    )
    return result
