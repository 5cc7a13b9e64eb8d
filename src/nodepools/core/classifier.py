# src/nodepools/core/classifier.py
"""
Assigns a node to exactly one pool identity from its labels.

Label sources are checked in a fixed priority order and the first match wins:
the custom label, then the Karpenter labels, then the cloud-provider labels.
A node with none of them belongs to the '-' pool.
"""

from typing import List, Mapping, Optional, Tuple

from ..models.node import NodeRecord

NO_POOL = "-"
UNKNOWN_INSTANCE_TYPE = "-"

KARPENTER_PREFIX = "(Karpenter) "

# Legacy provisioner label first, then the v1beta1+ nodepool label.
KARPENTER_LABELS: List[str] = [
    "karpenter.sh/provisioner-name",
    "karpenter.sh/nodepool",
]

# A node is expected to carry at most one of these; the order is the tie-break.
PROVIDER_NODEPOOL_LABELS: List[Tuple[str, str]] = [
    ("aws", "eks.amazonaws.com/nodegroup"),
    ("gcp", "cloud.google.com/gke-nodepool"),
    ("azure", "kubernetes.azure.com/agentpool"),
    ("digitalocean", "doks.digitalocean.com/node-pool-id"),
    ("ovh", "k8s.ovh.net/nodepool"),
]

INSTANCE_TYPE_LABELS: List[str] = [
    "node.kubernetes.io/instance-type",
    "beta.kubernetes.io/instance-type",
]


def classify(node: NodeRecord, custom_label: str = "") -> str:
    """Returns the pool identity of a node."""
    return find_nodepool(node.labels, custom_label)


def find_nodepool(labels: Mapping[str, str], custom_label: str = "") -> str:
    """
    Returns the pool identity for a label set.

    A present custom label wins even when its value is empty.
    """
    if custom_label and custom_label in labels:
        return labels[custom_label]

    for key in KARPENTER_LABELS:
        if key in labels:
            return KARPENTER_PREFIX + labels[key]

    for _, key in PROVIDER_NODEPOOL_LABELS:
        if key in labels:
            return labels[key]

    return NO_POOL


def provider_for_labels(labels: Mapping[str, str]) -> Optional[str]:
    """Returns which source grouped the node ('karpenter', a cloud provider name) or None."""
    for key in KARPENTER_LABELS:
        if key in labels:
            return "karpenter"
    for provider, key in PROVIDER_NODEPOOL_LABELS:
        if key in labels:
            return provider
    return None


def instance_type(labels: Mapping[str, str]) -> str:
    """Returns the node's instance type, or '-' when no instance-type label is set."""
    for key in INSTANCE_TYPE_LABELS:
        if key in labels:
            return labels[key]
    return UNKNOWN_INSTANCE_TYPE


def strip_karpenter_prefix(name: str) -> str:
    """'(Karpenter) spot' -> 'spot'; any other name is returned as is."""
    if name.startswith(KARPENTER_PREFIX):
        return name[len(KARPENTER_PREFIX) :]
    return name
