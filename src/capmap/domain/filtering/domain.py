"""Business-domain reachability and the domain filter.

Domain membership is derived, never stored. An artifact belongs to a domain
when it is

- a capability tagged to the domain, or a descendant of one
- a component tagged to the domain
- an origin entity linked by an origin relationship to such a component

The synthetic ``UNASSIGNED_DOMAIN`` token selects everything that belongs to
no known domain at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .hierarchy import expand_descendants
from .visibility import VisibilitySet

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping, Sequence

    from capmap.domain.model import (
        ArtifactId,
        BusinessDomainId,
        Capability,
        CapabilityId,
        ComponentId,
        OriginRelationship,
    )

    from .artifacts import FilterableArtifacts

log = logging.getLogger(__name__)

UNASSIGNED_DOMAIN: Final[str] = "__unassigned__"


@dataclass(frozen=True, slots=True)
class DomainFilterData:
    """Read-only inputs for domain reachability."""

    domain_capability_ids: Mapping[BusinessDomainId, Sequence[CapabilityId]] = field(
        default_factory=dict["BusinessDomainId", "Sequence[CapabilityId]"]
    )
    all_capabilities: Sequence[Capability] = field(default_factory=tuple["Capability", ...])
    domain_component_ids: Mapping[BusinessDomainId, Sequence[ComponentId]] = field(
        default_factory=dict["BusinessDomainId", "Sequence[ComponentId]"]
    )
    origin_relationships: Sequence[OriginRelationship] = field(
        default_factory=tuple["OriginRelationship", ...]
    )
    all_domain_ids: Sequence[BusinessDomainId] = field(
        default_factory=tuple["BusinessDomainId", ...]
    )

    def known_artifact_ids(self) -> frozenset[ArtifactId]:
        """Return the universe against which "unassigned" is defined."""

        known: set[ArtifactId] = {capability.id for capability in self.all_capabilities}
        for component_ids in self.domain_component_ids.values():
            known.update(component_ids)
        known.update(relationship.origin_entity_id for relationship in self.origin_relationships)
        return frozenset(known)


def reachable_ids(
    domain_ids: Iterable[BusinessDomainId],
    data: DomainFilterData,
) -> frozenset[ArtifactId]:
    """Return every artifact id associated with any of ``domain_ids``."""

    capability_ids: set[CapabilityId] = set()
    component_ids: set[ComponentId] = set()
    for domain_id in domain_ids:
        capability_ids.update(data.domain_capability_ids.get(domain_id, ()))
        component_ids.update(data.domain_component_ids.get(domain_id, ()))

    reachable: set[ArtifactId] = set(expand_descendants(capability_ids, data.all_capabilities))
    reachable.update(component_ids)
    reachable.update(
        relationship.origin_entity_id
        for relationship in data.origin_relationships
        if relationship.component_id in component_ids
    )
    return frozenset(reachable)


def unassigned_ids(data: DomainFilterData) -> frozenset[ArtifactId]:
    """Return the known artifact ids that no domain reaches."""

    return data.known_artifact_ids() - reachable_ids(data.all_domain_ids, data)


def visibility_for_domains(
    selected_domain_ids: Collection[str],
    data: DomainFilterData,
) -> VisibilitySet | None:
    """Build the visibility predicate for a domain selection.

    Returns ``None`` when the selection is empty, i.e. the filter is inactive.
    """

    if not selected_domain_ids:
        return None

    real_domain_ids = [
        domain_id for domain_id in selected_domain_ids if domain_id != UNASSIGNED_DOMAIN
    ]
    visibility = VisibilitySet()
    if real_domain_ids:
        visibility = VisibilitySet.of(reachable_ids(real_domain_ids, data))
    if UNASSIGNED_DOMAIN in selected_domain_ids:
        visibility |= VisibilitySet.complement_of(reachable_ids(data.all_domain_ids, data))
    return visibility


def compute_visible_artifact_ids(
    selected_domain_ids: Collection[str],
    data: DomainFilterData,
) -> frozenset[ArtifactId]:
    """Return the ids visible under ``selected_domain_ids`` as a finite set.

    The "unassigned" part is resolved against :meth:`DomainFilterData.known_artifact_ids`.
    An empty selection yields an empty set.
    """

    visibility = visibility_for_domains(selected_domain_ids, data)
    if visibility is None:
        return frozenset()
    return visibility.materialize(data.known_artifact_ids())


def filter_by_domain(
    artifacts: FilterableArtifacts,
    selected_domain_ids: Collection[str],
    data: DomainFilterData,
) -> FilterableArtifacts:
    """Keep artifacts visible under the selected domains.

    An empty selection disables the filter and returns ``artifacts`` itself.
    """

    visibility = visibility_for_domains(selected_domain_ids, data)
    if visibility is None:
        return artifacts

    result = artifacts.select(visibility.admits)
    log.debug(
        "Domain filter kept %s of %s artifacts for selection %s",
        result.count(),
        artifacts.count(),
        sorted(selected_domain_ids),
    )
    return result
