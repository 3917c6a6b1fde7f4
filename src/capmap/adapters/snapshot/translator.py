"""Translate snapshot payloads into domain records and filter inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from capmap.domain.filtering import DomainFilterData, FilterableArtifacts
from capmap.domain.model import (
    AcquiredEntity,
    Capability,
    Component,
    InternalTeam,
    OriginRelationship,
    Vendor,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from capmap.domain.model import ArtifactId, CreatorId

    from .schema import (
        AcquiredEntityPayload,
        CapabilityPayload,
        CatalogueSnapshotPayload,
        ComponentPayload,
        InternalTeamPayload,
        OriginRelationshipPayload,
        VendorPayload,
    )


@dataclass(frozen=True, slots=True)
class CatalogueSnapshot:
    """Everything the filters need, translated from one snapshot document."""

    artifacts: FilterableArtifacts
    domain_data: DomainFilterData
    creator_map: Mapping[ArtifactId, CreatorId] = field(
        default_factory=lambda: MappingProxyType({})
    )


def translate_component(payload: ComponentPayload) -> Component:
    return Component(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        created_at=payload.created_at,
    )


def translate_capability(payload: CapabilityPayload) -> Capability:
    return Capability(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        created_at=payload.created_at,
        level=payload.level,
        parent_id=payload.parent_id,
    )


def translate_acquired_entity(payload: AcquiredEntityPayload) -> AcquiredEntity:
    return AcquiredEntity(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        created_at=payload.created_at,
        component_count=payload.component_count,
        integration_status=payload.integration_status,
    )


def translate_vendor(payload: VendorPayload) -> Vendor:
    return Vendor(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        created_at=payload.created_at,
        component_count=payload.component_count,
    )


def translate_internal_team(payload: InternalTeamPayload) -> InternalTeam:
    return InternalTeam(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        created_at=payload.created_at,
        component_count=payload.component_count,
    )


def translate_origin_relationship(payload: OriginRelationshipPayload) -> OriginRelationship:
    return OriginRelationship(
        id=payload.id,
        component_id=payload.component_id,
        origin_entity_id=payload.origin_entity_id,
        relationship_type=payload.relationship_type,
    )


def translate_snapshot(payload: CatalogueSnapshotPayload) -> CatalogueSnapshot:
    """Build the artifact bundle, domain filter data and creator lookup."""

    capabilities = tuple(translate_capability(item) for item in payload.capabilities)
    artifacts = FilterableArtifacts(
        components=tuple(translate_component(item) for item in payload.components),
        capabilities=capabilities,
        acquired_entities=tuple(
            translate_acquired_entity(item) for item in payload.acquired_entities
        ),
        vendors=tuple(translate_vendor(item) for item in payload.vendors),
        internal_teams=tuple(translate_internal_team(item) for item in payload.internal_teams),
    )

    # Later entries for a repeated domain id extend the earlier ones.
    domain_capability_ids: dict[str, list[str]] = {}
    domain_component_ids: dict[str, list[str]] = {}
    for domain in payload.domains:
        domain_capability_ids.setdefault(domain.id, []).extend(domain.capability_ids)
        domain_component_ids.setdefault(domain.id, []).extend(domain.component_ids)

    domain_data = DomainFilterData(
        domain_capability_ids=MappingProxyType(
            {key: tuple(value) for key, value in domain_capability_ids.items()}
        ),
        all_capabilities=capabilities,
        domain_component_ids=MappingProxyType(
            {key: tuple(value) for key, value in domain_component_ids.items()}
        ),
        origin_relationships=tuple(
            translate_origin_relationship(item) for item in payload.origin_relationships
        ),
        all_domain_ids=tuple(domain_capability_ids),
    )

    return CatalogueSnapshot(
        artifacts=artifacts,
        domain_data=domain_data,
        creator_map=MappingProxyType(dict(payload.creators)),
    )
