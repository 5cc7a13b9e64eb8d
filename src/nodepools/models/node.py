# src/nodepools/models/node.py

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class NodeCondition(BaseModel):
    """One entry of a node's status conditions, reduced to its type and truthiness."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., description="Condition type (e.g. 'Ready', 'DiskPressure')")
    is_true: bool = Field(..., description="Whether the condition status is 'True'")


class NodeRecord(BaseModel):
    """
    Immutable view of one cluster node for the duration of a report.

    Attributes:
        name: Node name, unique within a report
        labels: Node labels
        conditions: Status conditions in the order the API returned them
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Node name")
    labels: Dict[str, str] = Field(default_factory=dict, description="Node labels")
    conditions: List[NodeCondition] = Field(default_factory=list, description="Node status conditions")


class PoolSummary(BaseModel):
    """
    Aggregate over all nodes sharing one pool identity.

    Attributes:
        name: Pool identity (label value, '(Karpenter) <value>' or '-')
        node_count: Number of nodes in the pool
        instance_types: Instance type -> number of nodes of that type
    """

    model_config = ConfigDict(frozen=False, extra="forbid")

    name: str = Field(..., description="Pool identity")
    node_count: int = Field(0, ge=0, description="Number of nodes in the pool")
    instance_types: Dict[str, int] = Field(default_factory=dict, description="Instance type occurrence counts")

    def add(self, instance_type: str) -> None:
        """Accounts for one more node of the given instance type."""
        self.node_count += 1
        self.instance_types[instance_type] = self.instance_types.get(instance_type, 0) + 1

    def type_list(self, with_counts: bool = False) -> str:
        """Instance types sorted by name and joined with ', '."""
        names = sorted(self.instance_types)
        if with_counts:
            return ", ".join(f"{name} ({self.instance_types[name]})" for name in names)
        return ", ".join(names)


class NodeStatus(BaseModel):
    """A node belonging to a requested pool, with its true conditions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Node name")
    status: str = Field("", description="Comma-joined types of the node's true conditions")
