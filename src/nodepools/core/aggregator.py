# src/nodepools/core/aggregator.py
"""
Aggregates nodes into per-pool summaries.
"""

from typing import Dict, Iterable, List

from ..models.node import NodeRecord, PoolSummary
from .classifier import classify, instance_type


def aggregate_nodepools(nodes: Iterable[NodeRecord], custom_label: str = "") -> List[PoolSummary]:
    """Group nodes by pool identity, counting nodes and instance types.

    Nodes are visited in input order. The result is sorted by pool name
    (plain string order, '-' included) and holds one summary per pool, so the
    node counts add up to the number of input nodes. An empty input yields an
    empty list.
    """
    pools: Dict[str, PoolSummary] = {}
    for node in nodes:
        name = classify(node, custom_label)
        pool = pools.get(name)
        if pool is None:
            pool = PoolSummary(name=name)
            pools[name] = pool
        pool.add(instance_type(node.labels))

    return [pools[name] for name in sorted(pools)]
