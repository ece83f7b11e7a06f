"""Base controller defining the inventory contract for the maintenance TUI.

Controllers are awaited from Textual workers, so every query is a coroutine
and the UI stays responsive while kubectl runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary


class BaseController(ABC):
    """Read-only cluster inventory.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def fetch_nodes(self) -> list[NodeSummary]:
        """Fetch every node in the cluster.

        Returns:
            Nodes in API order. Never empty: an empty cluster raises
            NoNodesFoundError.
        """
        ...

    @abstractmethod
    async def fetch_pods(self, node_name: str) -> list[PodSummary]:
        """Fetch the pods scheduled on one node.

        Returns:
            Pods in API order.
        """
        ...

    @abstractmethod
    async def get_node(self, node_name: str) -> NodeSummary:
        """Fetch the current record of a single node."""
        ...
