# tests/core/test_aggregator.py

from nodepools.core.aggregator import aggregate_nodepools


def test_aggregate_mixed_cluster(mixed_nodes):
    """EKS and Karpenter nodes are grouped and sorted by pool name."""
    result = aggregate_nodepools(mixed_nodes)

    assert [p.model_dump() for p in result] == [
        {"name": "(Karpenter) spot", "node_count": 1, "instance_types": {"-": 1}},
        {"name": "ng-1", "node_count": 2, "instance_types": {"m5.large": 1, "m5.xlarge": 1}},
    ]


def test_aggregate_empty_input():
    assert aggregate_nodepools([]) == []


def test_aggregate_counts_instance_types(make_node):
    nodes = [
        make_node(f"n{i}", {"cloud.google.com/gke-nodepool": "pool", "node.kubernetes.io/instance-type": t})
        for i, t in enumerate(["e2-small", "e2-medium", "e2-small"])
    ]
    (pool,) = aggregate_nodepools(nodes)

    assert pool.node_count == 3
    assert pool.instance_types == {"e2-small": 2, "e2-medium": 1}
    assert pool.type_list() == "e2-medium, e2-small"
    assert pool.type_list(with_counts=True) == "e2-medium (1), e2-small (2)"


def test_aggregate_totals_and_ordering(make_node):
    """Node counts add up to the input size and names strictly increase."""
    nodes = [
        make_node("a", {"eks.amazonaws.com/nodegroup": "b"}),
        make_node("b"),
        make_node("c", {"eks.amazonaws.com/nodegroup": "B"}),
        make_node("d", {"team": "x"}),
        make_node("e", {"eks.amazonaws.com/nodegroup": "b"}),
        make_node("f", {"karpenter.sh/provisioner-name": "default"}),
    ]
    result = aggregate_nodepools(nodes, "team")

    assert sum(p.node_count for p in result) == len(nodes)
    names = [p.name for p in result]
    assert names == ["(Karpenter) default", "-", "B", "b", "x"]
    assert all(a < b for a, b in zip(names, names[1:]))


def test_aggregate_uses_custom_label(make_node):
    nodes = [
        make_node("a", {"team": "payments", "eks.amazonaws.com/nodegroup": "ng-1"}),
        make_node("b", {"eks.amazonaws.com/nodegroup": "ng-1"}),
    ]
    result = aggregate_nodepools(nodes, "team")

    assert [(p.name, p.node_count) for p in result] == [("ng-1", 1), ("payments", 1)]


def test_aggregate_is_repeatable(mixed_nodes):
    assert aggregate_nodepools(mixed_nodes) == aggregate_nodepools(mixed_nodes)
