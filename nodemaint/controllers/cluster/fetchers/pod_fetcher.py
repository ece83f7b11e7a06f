"""Pod fetcher for cluster controller - fetches the pods bound to one node."""

from __future__ import annotations

import logging
from typing import Any

from nodemaint.constants.timeouts import CLUSTER_REQUEST_TIMEOUT_SECONDS
from nodemaint.controllers.cluster.fetchers.node_fetcher import (
    RunKubectl,
    decode_json_output,
)

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod data for a node using a server-side field selector."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout_seconds: int = CLUSTER_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._run_kubectl = run_kubectl_func
        self._request_timeout = f"{request_timeout_seconds}s"

    def _build_node_pods_args(self, node_name: str) -> tuple[str, ...]:
        return (
            "get",
            "pods",
            "--all-namespaces",
            f"--field-selector=spec.nodeName={node_name}",
            "-o",
            "json",
            f"--request-timeout={self._request_timeout}",
        )

    async def fetch_node_pods_raw(self, node_name: str) -> list[dict[str, Any]]:
        """Fetch all pods scheduled on ``node_name`` as raw API dictionaries."""
        output = await self._run_kubectl(self._build_node_pods_args(node_name))
        items = decode_json_output(output, f"pods on node {node_name}").get("items") or []
        logger.debug("Fetched %d pods on node %s", len(items), node_name)
        return items
