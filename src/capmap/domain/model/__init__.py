"""Public domain model surface."""

from __future__ import annotations

from capmap.domain.model.artifacts import (
    AcquiredEntity,
    Artifact,
    Capability,
    Component,
    InternalTeam,
    OriginEntity,
    OriginRelationship,
    Vendor,
)
from capmap.domain.model.enums import (
    ArtifactKind,
    CapabilityLevel,
    IntegrationStatus,
    OriginRelationshipType,
)
from capmap.domain.model.primitives import (
    ArtifactId,
    BusinessDomainId,
    CapabilityId,
    ComponentId,
    CreatorId,
    OriginEntityId,
)

__all__ = [  # noqa: RUF022
    # artifacts
    "Artifact",
    "Component",
    "Capability",
    "OriginEntity",
    "AcquiredEntity",
    "Vendor",
    "InternalTeam",
    "OriginRelationship",
    # enums
    "ArtifactKind",
    "CapabilityLevel",
    "IntegrationStatus",
    "OriginRelationshipType",
    # identifiers
    "ArtifactId",
    "BusinessDomainId",
    "CapabilityId",
    "ComponentId",
    "CreatorId",
    "OriginEntityId",
]
