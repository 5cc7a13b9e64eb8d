# src/nodepools/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.node import NodeStatus, PoolSummary


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report_pools(self, pools: List[PoolSummary]):
        """Presents the per-pool summaries."""
        pass

    @abstractmethod
    def report_nodes(self, nodes: List[NodeStatus]):
        """Presents the nodes of one pool."""
        pass
