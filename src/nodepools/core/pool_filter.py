# src/nodepools/core/pool_filter.py
"""
Selects the nodes of one pool for the nodes-in-pool report.
"""

from typing import Iterable, List

from ..models.node import NodeRecord, NodeStatus
from .classifier import classify, strip_karpenter_prefix


def node_condition(node: NodeRecord) -> str:
    """Types of the node's true conditions, comma-joined in their original order."""
    return ",".join(c.type for c in node.conditions if c.is_true)


def filter_by_pool(nodes: Iterable[NodeRecord], custom_label: str, requested_name: str) -> List[NodeStatus]:
    """Returns the nodes whose pool identity matches requested_name, sorted by node name.

    The Karpenter display prefix is stripped from both sides before comparing,
    so '(Karpenter) spot' and 'spot' select the same nodes. Other names must
    match exactly. No match yields an empty list.
    """
    wanted = strip_karpenter_prefix(requested_name)
    matched = [node for node in nodes if strip_karpenter_prefix(classify(node, custom_label)) == wanted]
    matched.sort(key=lambda n: n.name)
    return [NodeStatus(name=node.name, status=node_condition(node)) for node in matched]
