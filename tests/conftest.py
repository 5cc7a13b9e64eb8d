# tests/conftest.py

from typing import Dict, List, Optional, Tuple

import pytest

from nodepools.models.node import NodeCondition, NodeRecord


def make_node(
    name: str,
    labels: Optional[Dict[str, str]] = None,
    conditions: Optional[List[Tuple[str, bool]]] = None,
) -> NodeRecord:
    """Helper to build a NodeRecord from plain labels and (type, is_true) pairs."""
    return NodeRecord(
        name=name,
        labels=labels or {},
        conditions=[NodeCondition(type=t, is_true=v) for t, v in (conditions or [])],
    )


@pytest.fixture
def mixed_nodes() -> List[NodeRecord]:
    """Two EKS nodes in the same node group and one Karpenter node."""
    return [
        make_node(
            "node-b",
            {"eks.amazonaws.com/nodegroup": "ng-1", "node.kubernetes.io/instance-type": "m5.xlarge"},
            [("Ready", True)],
        ),
        make_node(
            "node-a",
            {"eks.amazonaws.com/nodegroup": "ng-1", "node.kubernetes.io/instance-type": "m5.large"},
            [("Ready", True), ("DiskPressure", True)],
        ),
        make_node("node-c", {"karpenter.sh/nodepool": "spot"}, [("Ready", True)]),
    ]


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Keep the configuration predictable and isolated from the actual environment.
    """
    monkeypatch.delenv("NODEPOOLS_LABEL", raising=False)
    monkeypatch.delenv("NODEPOOLS_CONTEXT", raising=False)
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture(name="make_node")
def make_node_fixture():
    """Exposes the make_node helper to tests."""
    return make_node
