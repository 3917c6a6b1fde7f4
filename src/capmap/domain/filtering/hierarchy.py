"""Traversal of the capability parent-pointer tree.

Two directions are needed by the filters:

- downwards: every descendant of a set of directly tagged capabilities
- upwards: every ancestor of a set of surviving capabilities, so a filtered
  tree can still be rendered from its roots

A ``parent_id`` that points at the capability itself is read as "no parent".
A ``parent_id`` that names an unknown capability ends the upward walk.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from capmap.domain.model import Capability, CapabilityId


class CapabilityCycleError(ValueError):
    """Raised when capability parent pointers form a cycle."""

    def __init__(self, cycle: Sequence[CapabilityId]) -> None:
        self.cycle = tuple(cycle)
        super().__init__(
            "Capability parent pointers form a cycle: " + " -> ".join((*self.cycle, self.cycle[0]))
        )


def _parent_of(capability: Capability) -> CapabilityId | None:
    if capability.parent_id == capability.id:
        return None
    return capability.parent_id


def _children_index(
    all_capabilities: Iterable[Capability],
) -> dict[CapabilityId, list[CapabilityId]]:
    children: dict[CapabilityId, list[CapabilityId]] = {}
    for capability in all_capabilities:
        parent_id = _parent_of(capability)
        if parent_id is not None:
            children.setdefault(parent_id, []).append(capability.id)
    return children


def find_parent_cycle(all_capabilities: Iterable[Capability]) -> tuple[CapabilityId, ...] | None:
    """Return the ids of one parent cycle, or ``None`` if the tree is acyclic."""

    parent_by_id = {capability.id: _parent_of(capability) for capability in all_capabilities}
    finished: set[CapabilityId] = set()

    for start in parent_by_id:
        path: list[CapabilityId] = []
        position: dict[CapabilityId, int] = {}
        current: CapabilityId | None = start
        while current is not None and current in parent_by_id and current not in finished:
            if current in position:
                return tuple(path[position[current] :])
            position[current] = len(path)
            path.append(current)
            current = parent_by_id[current]
        finished.update(path)
    return None


def expand_descendants(
    direct_ids: Iterable[CapabilityId],
    all_capabilities: Sequence[Capability],
) -> frozenset[CapabilityId]:
    """Return ``direct_ids`` together with all of their transitive children.

    Raises :class:`CapabilityCycleError` if the parent pointers are cyclic.
    """

    cycle = find_parent_cycle(all_capabilities)
    if cycle is not None:
        raise CapabilityCycleError(cycle)

    children = _children_index(all_capabilities)
    expanded: set[CapabilityId] = set(direct_ids)
    queue = deque(expanded)
    while queue:
        for child_id in children.get(queue.popleft(), ()):
            if child_id not in expanded:
                expanded.add(child_id)
                queue.append(child_id)
    return frozenset(expanded)


def preserve_capability_hierarchy(
    filtered_capabilities: Sequence[Capability],
    all_capabilities: Sequence[Capability],
) -> tuple[Capability, ...]:
    """Add back every ancestor of the filtered capabilities.

    The result follows the order of ``all_capabilities``; siblings are never
    added and each capability appears at most once. The upward walk stops at
    the first id that is already included, so it terminates on any input.
    """

    if not filtered_capabilities:
        return ()

    by_id = {capability.id: capability for capability in all_capabilities}
    included: set[CapabilityId] = {capability.id for capability in filtered_capabilities}

    for capability in filtered_capabilities:
        parent_id = _parent_of(capability)
        while parent_id is not None and parent_id not in included:
            parent = by_id.get(parent_id)
            if parent is None:
                break
            included.add(parent_id)
            parent_id = _parent_of(parent)

    return tuple(capability for capability in all_capabilities if capability.id in included)
