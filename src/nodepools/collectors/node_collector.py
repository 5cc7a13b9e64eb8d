# src/nodepools/collectors/node_collector.py

import logging
from typing import List, Optional

from kubernetes_asyncio.client.rest import ApiException

from ..core.classifier import instance_type, provider_for_labels
from ..core.exceptions import NodeListError
from ..core.k8s_client import get_core_v1_api
from ..models.node import NodeCondition, NodeRecord
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class NodeCollector(BaseCollector):
    """Lists the cluster nodes once and converts them to NodeRecord objects."""

    def __init__(self, kubeconfig: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig = kubeconfig
        self.context = context
        self._api = None

    async def _ensure_client(self):
        """
        Lazily initialize the Kubernetes Async client.
        """
        if self._api:
            return self._api

        self._api = await get_core_v1_api(kubeconfig=self.kubeconfig, context=self.context)
        return self._api

    async def collect(self) -> List[NodeRecord]:
        """
        Lists every node in the cluster.

        Raises:
            ClusterConfigError: If no Kubernetes configuration could be loaded.
            NodeListError: If the API call fails.
        """
        api = await self._ensure_client()

        try:
            nodes = await api.list_node(watch=False)
        except ApiException as e:
            logger.error("Kubernetes API error while listing nodes: %s", e)
            raise NodeListError(f"failed to list nodes: {e.status} {e.reason}") from e
        except Exception as e:
            logger.error("An unexpected error occurred while listing nodes: %s", e)
            raise NodeListError(f"failed to list nodes: {e}") from e

        if not nodes.items:
            logger.warning("No nodes found in the cluster.")
            return []

        records = []
        for node in nodes.items:
            record = self._to_record(node)
            logger.info(
                " -> Node '%s': source=%s, instance=%s",
                record.name,
                provider_for_labels(record.labels),
                instance_type(record.labels),
            )
            records.append(record)

        return records

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("NodeCollector Kubernetes client closed.")
            self._api = None

    @staticmethod
    def _to_record(node) -> NodeRecord:
        """Convert a V1Node into a NodeRecord."""
        labels = node.metadata.labels or {}
        status = getattr(node, "status", None)
        conditions = (status.conditions if status else None) or []
        return NodeRecord(
            name=node.metadata.name,
            labels=dict(labels),
            conditions=[NodeCondition(type=c.type, is_true=c.status == "True") for c in conditions],
        )
