"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CapabilityLevel(StrEnum):
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"
    L4 = "L4"


class OriginRelationshipType(StrEnum):
    """Kind of edge between a component and the entity it originated from."""

    ACQUIRED_VIA = "AcquiredVia"
    PURCHASED_FROM = "PurchasedFrom"
    BUILT_BY = "BuiltBy"


class IntegrationStatus(StrEnum):
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class ArtifactKind(StrEnum):
    """Discriminator for the filterable artifact collections."""

    COMPONENT = "component"
    CAPABILITY = "capability"
    ACQUIRED_ENTITY = "acquired_entity"
    VENDOR = "vendor"
    INTERNAL_TEAM = "internal_team"
