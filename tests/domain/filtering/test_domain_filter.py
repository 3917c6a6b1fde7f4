from __future__ import annotations

import pytest

from capmap.domain.filtering import (
    UNASSIGNED_DOMAIN,
    DomainFilterData,
    FilterableArtifacts,
    compute_visible_artifact_ids,
    filter_by_domain,
    reachable_ids,
    unassigned_ids,
)
from capmap.domain.model import Artifact, CapabilityLevel, OriginRelationshipType
from tests.helpers.catalogue import (
    make_acquired_entity,
    make_capability,
    make_component,
    make_internal_team,
    make_relationship,
    make_vendor,
)

DOMAIN_A = "domain-a"
DOMAIN_B = "domain-b"


def test_empty_selection_returns_the_same_bundle() -> None:
    artifacts = FilterableArtifacts(
        components=(make_component("comp-1"),),
        capabilities=(make_capability("cap-1"),),
        acquired_entities=(make_acquired_entity("ae-1"),),
        vendors=(make_vendor("vendor-1"),),
        internal_teams=(make_internal_team("team-1"),),
    )

    assert filter_by_domain(artifacts, [], DomainFilterData()) is artifacts


def test_descendants_of_tagged_capability_are_included() -> None:
    root = make_capability("cap-root")
    child = make_capability("cap-child", parent_id="cap-root", level=CapabilityLevel.L2)
    grandchild = make_capability("cap-grandchild", parent_id="cap-child", level=CapabilityLevel.L3)
    unrelated = make_capability("cap-unrelated")
    capabilities = (root, child, grandchild, unrelated)
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-root"]},
        all_capabilities=capabilities,
        all_domain_ids=[DOMAIN_A],
    )

    result = filter_by_domain(FilterableArtifacts(capabilities=capabilities), [DOMAIN_A], data)

    assert result.capabilities == (root, child, grandchild)


def test_components_tagged_to_domain_are_included() -> None:
    comp_1 = make_component("comp-1")
    comp_2 = make_component("comp-2")
    comp_3 = make_component("comp-3")
    data = DomainFilterData(
        domain_component_ids={DOMAIN_A: ["comp-1", "comp-2"]},
        all_domain_ids=[DOMAIN_A],
    )

    result = filter_by_domain(
        FilterableArtifacts(components=(comp_1, comp_2, comp_3)), [DOMAIN_A], data
    )

    assert result.components == (comp_1, comp_2)


@pytest.mark.parametrize(
    ("collection", "included", "excluded", "relationship_type"),
    [
        (
            "acquired_entities",
            make_acquired_entity("ae-1"),
            make_acquired_entity("ae-2"),
            OriginRelationshipType.ACQUIRED_VIA,
        ),
        (
            "vendors",
            make_vendor("vendor-1"),
            make_vendor("vendor-2"),
            OriginRelationshipType.PURCHASED_FROM,
        ),
        (
            "internal_teams",
            make_internal_team("team-1"),
            make_internal_team("team-2"),
            OriginRelationshipType.BUILT_BY,
        ),
    ],
)
def test_origin_entities_of_tagged_components_are_included(
    collection: str,
    included: Artifact,
    excluded: Artifact,
    relationship_type: OriginRelationshipType,
) -> None:
    artifacts = FilterableArtifacts(**{collection: (included, excluded)})
    data = DomainFilterData(
        domain_component_ids={DOMAIN_A: ["comp-1"]},
        origin_relationships=[
            make_relationship("comp-1", included.id, relationship_type),
        ],
        all_domain_ids=[DOMAIN_A],
    )

    result = filter_by_domain(artifacts, [DOMAIN_A], data)

    assert getattr(result, collection) == (included,)


def test_multiple_domains_are_unioned() -> None:
    cap_1 = make_capability("cap-1")
    cap_2 = make_capability("cap-2")
    cap_3 = make_capability("cap-3")
    comp_1 = make_component("comp-1")
    comp_2 = make_component("comp-2")
    capabilities = (cap_1, cap_2, cap_3)
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-1"], DOMAIN_B: ["cap-2"]},
        all_capabilities=capabilities,
        domain_component_ids={DOMAIN_A: ["comp-1"], DOMAIN_B: ["comp-2"]},
        all_domain_ids=[DOMAIN_A, DOMAIN_B],
    )
    artifacts = FilterableArtifacts(components=(comp_1, comp_2), capabilities=capabilities)

    result = filter_by_domain(artifacts, [DOMAIN_A, DOMAIN_B], data)

    assert result.capabilities == (cap_1, cap_2)
    assert result.components == (comp_1, comp_2)


def test_unassigned_selects_capabilities_outside_every_domain() -> None:
    tagged = make_capability("cap-1")
    orphan = make_capability("cap-orphan")
    capabilities = (tagged, orphan)
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-1"]},
        all_capabilities=capabilities,
        all_domain_ids=[DOMAIN_A],
    )

    result = filter_by_domain(
        FilterableArtifacts(capabilities=capabilities), [UNASSIGNED_DOMAIN], data
    )

    assert result.capabilities == (orphan,)


def test_unassigned_selects_components_and_origin_entities_outside_every_domain() -> None:
    assigned = make_component("comp-assigned")
    orphan = make_component("comp-orphan")
    linked = make_acquired_entity("ae-linked")
    orphan_entity = make_acquired_entity("ae-orphan")
    data = DomainFilterData(
        domain_component_ids={DOMAIN_A: ["comp-assigned"]},
        origin_relationships=[
            make_relationship("comp-assigned", "ae-linked"),
            make_relationship("comp-orphan", "ae-orphan"),
        ],
        all_domain_ids=[DOMAIN_A],
    )
    artifacts = FilterableArtifacts(
        components=(assigned, orphan),
        acquired_entities=(linked, orphan_entity),
    )

    result = filter_by_domain(artifacts, [UNASSIGNED_DOMAIN], data)

    assert result.components == (orphan,)
    assert result.acquired_entities == (orphan_entity,)


def test_unassigned_considers_domains_that_are_not_selected() -> None:
    in_a = make_capability("cap-a")
    in_b = make_capability("cap-b")
    orphan = make_capability("cap-orphan")
    capabilities = (in_a, in_b, orphan)
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-a"], DOMAIN_B: ["cap-b"]},
        all_capabilities=capabilities,
        all_domain_ids=[DOMAIN_A, DOMAIN_B],
    )
    artifacts = FilterableArtifacts(capabilities=capabilities)

    result = filter_by_domain(artifacts, [DOMAIN_A, UNASSIGNED_DOMAIN], data)

    assert result.capabilities == (in_a, orphan)


def test_full_traversal_from_domain_to_origin_entities() -> None:
    cap_root = make_capability("cap-root")
    cap_child = make_capability("cap-child", parent_id="cap-root", level=CapabilityLevel.L2)
    cap_other = make_capability("cap-other")
    comp_1 = make_component("comp-1")
    comp_2 = make_component("comp-2")
    comp_3 = make_component("comp-3")
    ae_1 = make_acquired_entity("ae-1")
    ae_unrelated = make_acquired_entity("ae-unrelated")
    vendor_1 = make_vendor("vendor-1")
    team_1 = make_internal_team("team-1")
    capabilities = (cap_root, cap_child, cap_other)
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-root"]},
        all_capabilities=capabilities,
        domain_component_ids={DOMAIN_A: ["comp-1", "comp-2"]},
        origin_relationships=[
            make_relationship("comp-1", "ae-1"),
            make_relationship("comp-1", "vendor-1", OriginRelationshipType.PURCHASED_FROM),
            make_relationship("comp-2", "team-1", OriginRelationshipType.BUILT_BY),
            make_relationship("comp-3", "ae-unrelated"),
        ],
        all_domain_ids=[DOMAIN_A],
    )
    artifacts = FilterableArtifacts(
        components=(comp_1, comp_2, comp_3),
        capabilities=capabilities,
        acquired_entities=(ae_1, ae_unrelated),
        vendors=(vendor_1,),
        internal_teams=(team_1,),
    )

    result = filter_by_domain(artifacts, [DOMAIN_A], data)

    assert result.capabilities == (cap_root, cap_child)
    assert result.components == (comp_1, comp_2)
    assert result.acquired_entities == (ae_1,)
    assert result.vendors == (vendor_1,)
    assert result.internal_teams == (team_1,)


def test_unknown_domain_contributes_nothing() -> None:
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-1"]},
        all_capabilities=(make_capability("cap-1"),),
        all_domain_ids=[DOMAIN_A],
    )

    assert reachable_ids(["domain-unknown"], data) == frozenset()


def test_compute_visible_ids_includes_descendants_components_and_origin_entities() -> None:
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-root"]},
        all_capabilities=(
            make_capability("cap-root"),
            make_capability("cap-child", parent_id="cap-root"),
            make_capability("cap-grandchild", parent_id="cap-child"),
        ),
        domain_component_ids={DOMAIN_A: ["comp-1", "comp-2"]},
        origin_relationships=[
            make_relationship("comp-1", "ae-1"),
            make_relationship("comp-9", "ae-2"),
        ],
        all_domain_ids=[DOMAIN_A],
    )

    visible = compute_visible_artifact_ids([DOMAIN_A], data)

    assert visible == {"cap-root", "cap-child", "cap-grandchild", "comp-1", "comp-2", "ae-1"}


def test_compute_visible_ids_for_unassigned_is_the_complement() -> None:
    data = DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-1", "cap-2"]},
        all_capabilities=(
            make_capability("cap-1"),
            make_capability("cap-2"),
            make_capability("cap-orphan"),
        ),
        domain_component_ids={DOMAIN_A: ["comp-1"]},
        all_domain_ids=[DOMAIN_A],
    )

    visible = compute_visible_artifact_ids([UNASSIGNED_DOMAIN], data)

    assert visible == {"cap-orphan"}


def test_compute_visible_ids_for_empty_selection_is_empty() -> None:
    data = DomainFilterData(all_capabilities=(make_capability("cap-1"),))

    assert compute_visible_artifact_ids([], data) == frozenset()


def _property_data() -> DomainFilterData:
    return DomainFilterData(
        domain_capability_ids={DOMAIN_A: ["cap-1"], DOMAIN_B: ["cap-3"]},
        all_capabilities=(
            make_capability("cap-1"),
            make_capability("cap-1-1", parent_id="cap-1"),
            make_capability("cap-2"),
            make_capability("cap-3"),
        ),
        domain_component_ids={DOMAIN_A: ["comp-1"], DOMAIN_B: ["comp-2"]},
        origin_relationships=[
            make_relationship("comp-1", "ae-1"),
            make_relationship("comp-2", "vendor-1", OriginRelationshipType.PURCHASED_FROM),
            make_relationship("comp-3", "team-1", OriginRelationshipType.BUILT_BY),
        ],
        all_domain_ids=[DOMAIN_A, DOMAIN_B],
    )


def test_unassigned_and_reachable_partition_the_known_universe() -> None:
    data = _property_data()

    reachable = reachable_ids(data.all_domain_ids, data)
    unassigned = unassigned_ids(data)

    assert reachable.isdisjoint(unassigned)
    assert reachable | unassigned == data.known_artifact_ids()
    assert unassigned == {"cap-2", "team-1"}


def test_visible_ids_grow_monotonically_with_the_selection() -> None:
    data = _property_data()
    selections = [
        [],
        [DOMAIN_A],
        [DOMAIN_A, DOMAIN_B],
        [DOMAIN_A, DOMAIN_B, UNASSIGNED_DOMAIN],
    ]

    visible_sets = [compute_visible_artifact_ids(selection, data) for selection in selections]

    for smaller, larger in zip(visible_sets, visible_sets[1:], strict=False):
        assert smaller <= larger


def test_filtering_twice_changes_nothing() -> None:
    data = _property_data()
    artifacts = FilterableArtifacts(
        components=(make_component("comp-1"), make_component("comp-3")),
        capabilities=data.all_capabilities,
        acquired_entities=(make_acquired_entity("ae-1"),),
        vendors=(make_vendor("vendor-1"),),
        internal_teams=(make_internal_team("team-1"),),
    )
    selection = [DOMAIN_B, UNASSIGNED_DOMAIN]

    once = filter_by_domain(artifacts, selection, data)
    twice = filter_by_domain(once, selection, data)

    assert twice == once
