"""Schemas for catalogue snapshot documents.

A snapshot is the JSON export of the catalogue collections, the domain
assignments and the creator lookup. Keys follow the catalogue API (camelCase).
"""

from __future__ import annotations

import logging
from datetime import datetime  # noqa: TC003 # pydantic resolves field types at runtime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from capmap.domain.model import CapabilityLevel, IntegrationStatus, OriginRelationshipType

log = logging.getLogger(__name__)


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Snapshot %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class ArtifactPayload(SnapshotBaseModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")


class ComponentPayload(ArtifactPayload):
    _logged_extra_keys: ClassVar[set[str]] = set()


class CapabilityPayload(ArtifactPayload):
    _logged_extra_keys: ClassVar[set[str]] = set()

    parent_id: str | None = Field(default=None, alias="parentId")
    level: CapabilityLevel = CapabilityLevel.L1


class OriginEntityPayload(ArtifactPayload):
    component_count: int = Field(default=0, alias="componentCount")


class AcquiredEntityPayload(OriginEntityPayload):
    _logged_extra_keys: ClassVar[set[str]] = set()

    integration_status: IntegrationStatus | None = Field(default=None, alias="integrationStatus")


class VendorPayload(OriginEntityPayload):
    _logged_extra_keys: ClassVar[set[str]] = set()


class InternalTeamPayload(OriginEntityPayload):
    _logged_extra_keys: ClassVar[set[str]] = set()


class OriginRelationshipPayload(SnapshotBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    component_id: str = Field(alias="componentId")
    origin_entity_id: str = Field(alias="originEntityId")
    relationship_type: OriginRelationshipType = Field(alias="relationshipType")


class BusinessDomainPayload(SnapshotBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str
    name: str | None = None
    capability_ids: list[str] = Field(default_factory=list, alias="capabilityIds")
    component_ids: list[str] = Field(default_factory=list, alias="componentIds")


class CatalogueSnapshotPayload(SnapshotBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    components: list[ComponentPayload] = Field(default_factory=list["ComponentPayload"])
    capabilities: list[CapabilityPayload] = Field(default_factory=list["CapabilityPayload"])
    acquired_entities: list[AcquiredEntityPayload] = Field(
        default_factory=list["AcquiredEntityPayload"], alias="acquiredEntities"
    )
    vendors: list[VendorPayload] = Field(default_factory=list["VendorPayload"])
    internal_teams: list[InternalTeamPayload] = Field(
        default_factory=list["InternalTeamPayload"], alias="internalTeams"
    )
    origin_relationships: list[OriginRelationshipPayload] = Field(
        default_factory=list["OriginRelationshipPayload"], alias="originRelationships"
    )
    domains: list[BusinessDomainPayload] = Field(default_factory=list["BusinessDomainPayload"])
    creators: dict[str, str] = Field(default_factory=dict)
