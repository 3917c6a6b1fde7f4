"""Catalogue artifacts as immutable value records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import CapabilityLevel, IntegrationStatus, OriginRelationshipType

if TYPE_CHECKING:
    from datetime import datetime

    from .primitives import ArtifactId, CapabilityId, ComponentId, OriginEntityId


@dataclass(frozen=True, slots=True, kw_only=True)
class Artifact:
    """Base record for anything that can be filtered by id."""

    id: ArtifactId
    name: str
    description: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Component(Artifact):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class Capability(Artifact):
    """Node in the capability tree; ``parent_id`` is ``None`` for roots."""

    level: CapabilityLevel = CapabilityLevel.L1
    parent_id: CapabilityId | None = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True, slots=True, kw_only=True)
class OriginEntity(Artifact):
    component_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class AcquiredEntity(OriginEntity):
    integration_status: IntegrationStatus | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Vendor(OriginEntity):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalTeam(OriginEntity):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class OriginRelationship:
    """Join record linking a component to the entity that originated it."""

    component_id: ComponentId
    origin_entity_id: OriginEntityId
    relationship_type: OriginRelationshipType
    id: str | None = None
