"""Domain primitives: identifier aliases.

All identifiers are opaque strings. Filtering treats them as one shared
namespace, so the aliases only document intent.
"""

from __future__ import annotations

from typing import TypeAlias

ArtifactId: TypeAlias = str
ComponentId: TypeAlias = str
CapabilityId: TypeAlias = str
OriginEntityId: TypeAlias = str
BusinessDomainId: TypeAlias = str
CreatorId: TypeAlias = str
