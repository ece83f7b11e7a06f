"""Node fetcher for cluster controller - fetches node data from Kubernetes cluster."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from nodemaint.constants.timeouts import CLUSTER_REQUEST_TIMEOUT_SECONDS
from nodemaint.controllers.cluster.errors import ClusterCommandError

logger = logging.getLogger(__name__)

RunKubectl = Callable[[tuple[str, ...]], Awaitable[str]]


def decode_json_output(output: str, what: str) -> dict[str, Any]:
    """Decode kubectl ``-o json`` output into a mapping."""
    try:
        payload = json.loads(output or "{}")
    except json.JSONDecodeError as e:
        raise ClusterCommandError(f"unexpected kubectl output for {what}: {e}") from e
    if not isinstance(payload, dict):
        raise ClusterCommandError(f"unexpected kubectl output for {what}")
    return payload


class NodeFetcher:
    """Fetches node data from Kubernetes cluster."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout_seconds: int = CLUSTER_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout_seconds: Value for kubectl --request-timeout
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = f"{request_timeout_seconds}s"

    def _build_list_args(self) -> tuple[str, ...]:
        return (
            "get",
            "nodes",
            "-o",
            "json",
            f"--request-timeout={self._request_timeout}",
        )

    def _build_get_args(self, node_name: str) -> tuple[str, ...]:
        return (
            "get",
            "node",
            node_name,
            "-o",
            "json",
            f"--request-timeout={self._request_timeout}",
        )

    async def fetch_nodes_raw(self) -> list[dict[str, Any]]:
        """Fetch all nodes as raw API dictionaries."""
        output = await self._run_kubectl(self._build_list_args())
        items = decode_json_output(output, "nodes").get("items") or []
        logger.debug("Fetched %d nodes", len(items))
        return items

    async def fetch_node_raw(self, node_name: str) -> dict[str, Any]:
        """Fetch a single node as a raw API dictionary."""
        output = await self._run_kubectl(self._build_get_args(node_name))
        return decode_json_output(output, f"node {node_name}")
