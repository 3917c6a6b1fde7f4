"""Composable visibility predicate over artifact ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from capmap.domain.model import Artifact, ArtifactId


@dataclass(frozen=True, slots=True)
class VisibilitySet:
    """A set of visible ids that may be finite or co-finite.

    ``included`` lists ids that are visible outright. When ``excluded`` is not
    ``None`` every id *not* in it is visible as well, which is how "reachable
    from no domain" is expressed without knowing the full id universe.
    """

    included: frozenset[ArtifactId] = frozenset()
    excluded: frozenset[ArtifactId] | None = None

    @classmethod
    def of(cls, ids: Iterable[ArtifactId]) -> VisibilitySet:
        return cls(included=frozenset(ids))

    @classmethod
    def complement_of(cls, ids: Iterable[ArtifactId]) -> VisibilitySet:
        return cls(excluded=frozenset(ids))

    def __contains__(self, artifact_id: object) -> bool:
        if artifact_id in self.included:
            return True
        return self.excluded is not None and artifact_id not in self.excluded

    def __or__(self, other: VisibilitySet) -> VisibilitySet:
        if self.excluded is None:
            excluded = other.excluded
        elif other.excluded is None:
            excluded = self.excluded
        else:
            excluded = self.excluded & other.excluded
        return VisibilitySet(included=self.included | other.included, excluded=excluded)

    def admits(self, artifact: Artifact) -> bool:
        return artifact.id in self

    def materialize(self, universe: Iterable[ArtifactId]) -> frozenset[ArtifactId]:
        """Return the finite id set, resolving the co-finite part against ``universe``."""

        if self.excluded is None:
            return self.included
        return self.included | frozenset(universe).difference(self.excluded)
