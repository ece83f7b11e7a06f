"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from nodemaint.constants.values import NODE_ROLE_LABEL_PREFIX
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.utils.duration import age_since


class NodeParser:
    """Parses node data into structured formats."""

    _INTERNAL_ADDRESS_TYPE = "InternalIP"

    @staticmethod
    def get_node_roles(labels: dict[str, str]) -> tuple[str, ...]:
        """Return sorted role names from ``node-role.kubernetes.io/<role>`` labels."""
        roles = [
            label[len(NODE_ROLE_LABEL_PREFIX):]
            for label in labels
            if label.startswith(NODE_ROLE_LABEL_PREFIX)
        ]
        return tuple(sorted(role for role in roles if role))

    @classmethod
    def _get_internal_address(cls, addresses: list[dict[str, Any]]) -> str:
        """Prefer the InternalIP address, then fall back to the first one."""
        for address in addresses:
            if address.get("type") == cls._INTERNAL_ADDRESS_TYPE and address.get("address"):
                return str(address["address"])
        if addresses:
            return str(addresses[0].get("address", ""))
        return ""

    def parse_node(self, node: dict[str, Any], now: datetime | None = None) -> NodeSummary:
        """Parse a single node into NodeSummary.

        Args:
            node: Raw node dictionary from API
            now: Reference time for the age, defaults to the current time

        Returns:
            NodeSummary object.
        """
        metadata = node.get("metadata", {})
        status = node.get("status", {})
        spec = node.get("spec", {})
        labels = metadata.get("labels") or {}

        conditions = [
            c for c in status.get("conditions") or [] if "type" in c and "status" in c
        ]
        true_conditions = tuple(str(c["type"]) for c in conditions if c["status"] == "True")
        is_ready = any(c["type"] == "Ready" and c["status"] == "True" for c in conditions)

        return NodeSummary(
            name=metadata.get("name", ""),
            ready=is_ready,
            schedulable=not spec.get("unschedulable", False),
            roles=self.get_node_roles(labels),
            age=age_since(metadata.get("creationTimestamp"), now),
            kubelet_version=status.get("nodeInfo", {}).get("kubeletVersion", ""),
            internal_address=self._get_internal_address(status.get("addresses") or []),
            true_conditions=true_conditions,
        )

    def parse_node_list(
        self, items: list[dict[str, Any]], now: datetime | None = None
    ) -> list[NodeSummary]:
        """Parse a node list, keeping API order."""
        return [self.parse_node(item, now) for item in items]
