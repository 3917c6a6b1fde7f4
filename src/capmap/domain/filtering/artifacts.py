"""The bundle of artifact collections that filters operate on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from capmap.domain.model import ArtifactKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from capmap.domain.model import (
        AcquiredEntity,
        Artifact,
        Capability,
        Component,
        InternalTeam,
        Vendor,
    )

ArtifactPredicate: TypeAlias = "Callable[[Artifact], bool]"


@dataclass(frozen=True, slots=True)
class FilterableArtifacts:
    """One read-only snapshot of every filterable collection.

    Filters never mutate a bundle; they return a new one holding stable
    subsequences of the original collections.
    """

    components: Sequence[Component] = field(default_factory=tuple["Component", ...])
    capabilities: Sequence[Capability] = field(default_factory=tuple["Capability", ...])
    acquired_entities: Sequence[AcquiredEntity] = field(
        default_factory=tuple["AcquiredEntity", ...]
    )
    vendors: Sequence[Vendor] = field(default_factory=tuple["Vendor", ...])
    internal_teams: Sequence[InternalTeam] = field(default_factory=tuple["InternalTeam", ...])

    def collection(self, kind: ArtifactKind) -> Sequence[Artifact]:
        return getattr(self, _FIELD_BY_KIND[kind])

    def items(self) -> Iterator[tuple[ArtifactKind, Sequence[Artifact]]]:
        for kind in ArtifactKind:
            yield kind, self.collection(kind)

    def ids(self) -> frozenset[str]:
        return frozenset(item.id for _, items in self.items() for item in items)

    def count(self) -> int:
        return sum(len(items) for _, items in self.items())

    def select(self, predicate: ArtifactPredicate) -> FilterableArtifacts:
        """Apply one predicate to every collection, preserving item order."""

        return FilterableArtifacts(
            components=tuple(item for item in self.components if predicate(item)),
            capabilities=tuple(item for item in self.capabilities if predicate(item)),
            acquired_entities=tuple(item for item in self.acquired_entities if predicate(item)),
            vendors=tuple(item for item in self.vendors if predicate(item)),
            internal_teams=tuple(item for item in self.internal_teams if predicate(item)),
        )


_FIELD_BY_KIND: dict[ArtifactKind, str] = {
    ArtifactKind.COMPONENT: "components",
    ArtifactKind.CAPABILITY: "capabilities",
    ArtifactKind.ACQUIRED_ENTITY: "acquired_entities",
    ArtifactKind.VENDOR: "vendors",
    ArtifactKind.INTERNAL_TEAM: "internal_teams",
}
