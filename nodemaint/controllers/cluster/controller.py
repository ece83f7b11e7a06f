"""Cluster controller for node maintenance data operations.

This module owns the kubectl runner shared by the inventory queries and the
maintenance executor, and delegates to specialized fetchers and parsers for
node and pod data.
"""

from __future__ import annotations

import asyncio
import logging
import math
import shutil
import subprocess
from contextlib import suppress
from pathlib import Path

from nodemaint.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT_SECONDS,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_PROCESS_GRACE_SECONDS,
    KUBECTL_SETUP_TIMEOUT,
)
from nodemaint.controllers.base import BaseController
from nodemaint.controllers.cluster.errors import (
    ClusterCommandError,
    NoNodesFoundError,
    SetupError,
)
from nodemaint.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from nodemaint.controllers.cluster.parsers import NodeParser, PodParser
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Cluster inventory backed by kubectl.

    This class serves as an orchestrator that delegates to:
    - NodeFetcher / NodeParser: node list and single node lookups
    - PodFetcher / PodParser: pods bound to one node

    The runner carries only the kubeconfig and context, so it is safe to share
    between concurrent workers.
    """

    _TIMEOUT_FLAG_PREFIXES = ("--request-timeout=", "--timeout=")

    def __init__(
        self,
        context: str | None = None,
        kubeconfig: str | None = None,
        request_timeout_seconds: int = CLUSTER_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name.
            kubeconfig: Optional kubeconfig path.
            request_timeout_seconds: Per-request timeout passed to kubectl.
        """
        self.context = context or None
        self.kubeconfig = kubeconfig or None
        self.request_timeout_seconds = request_timeout_seconds

        self._node_fetcher = NodeFetcher(self.run_kubectl, request_timeout_seconds)
        self._pod_fetcher = PodFetcher(self.run_kubectl, request_timeout_seconds)
        self._node_parser = NodeParser()
        self._pod_parser = PodParser()

    # =========================================================================
    # kubectl runner
    # =========================================================================

    def _base_command(self) -> list[str]:
        cmd = ["kubectl"]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        return cmd

    @classmethod
    def _timeout_flag_seconds(cls, args: tuple[str, ...]) -> int | None:
        """Return the largest kubectl-side timeout found in args, in seconds."""
        found: list[int] = []
        for part in args:
            for prefix in cls._TIMEOUT_FLAG_PREFIXES:
                if not part.startswith(prefix):
                    continue
                value = part[len(prefix):].strip().lower()
                if value.endswith("s"):
                    value = value[:-1]
                with suppress(ValueError):
                    seconds = float(value)
                    if seconds > 0:
                        found.append(max(1, math.ceil(seconds)))
        return max(found) if found else None

    def _kubectl_timeout_for_args(self, args: tuple[str, ...]) -> int:
        """Choose a process timeout that outlives kubectl's own timeouts."""
        flag_seconds = self._timeout_flag_seconds(args)
        if flag_seconds is None:
            return KUBECTL_COMMAND_TIMEOUT
        return max(KUBECTL_COMMAND_TIMEOUT, flag_seconds + KUBECTL_PROCESS_GRACE_SECONDS)

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._base_command()
        cmd.extend(args)
        effective_timeout = timeout if timeout is not None else self._kubectl_timeout_for_args(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except subprocess.TimeoutExpired as e:
            verb = args[0] if args else "command"
            raise ClusterCommandError(
                f"kubectl {verb} timed out after {effective_timeout} seconds"
            ) from e
        except OSError as e:
            raise ClusterCommandError(f"failed to run kubectl: {e}") from e
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ClusterCommandError(stderr or "kubectl command failed")
        return result.stdout

    async def run_kubectl(self, args: tuple[str, ...]) -> str:
        """Run kubectl off the event loop and return its stdout."""
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    # =========================================================================
    # Setup
    # =========================================================================

    def verify_setup(self) -> str:
        """Check that kubectl and the selected kubeconfig/context are usable.

        Returns:
            The context that will be used.

        Raises:
            SetupError: kubectl is missing or the kubeconfig/context is invalid.
        """
        if shutil.which("kubectl") is None:
            raise SetupError("kubectl executable not found in PATH")
        if self.kubeconfig and not Path(self.kubeconfig).expanduser().exists():
            raise SetupError(f"kubeconfig not found: {self.kubeconfig}")

        if self.context:
            args: tuple[str, ...] = ("config", "get-contexts", self.context, "-o", "name")
        else:
            args = ("config", "current-context")
        try:
            output = self._run_kubectl_sync(args, timeout=KUBECTL_SETUP_TIMEOUT)
        except ClusterCommandError as e:
            raise SetupError(f"failed to get kubeconfig: {e}") from e

        context = output.strip() or (self.context or "")
        logger.info("Using kubectl context %s", context)
        return context

    # =========================================================================
    # Inventory
    # =========================================================================

    async def fetch_nodes(self) -> list[NodeSummary]:
        items = await self._node_fetcher.fetch_nodes_raw()
        if not items:
            raise NoNodesFoundError()
        return self._node_parser.parse_node_list(items)

    async def fetch_pods(self, node_name: str) -> list[PodSummary]:
        items = await self._pod_fetcher.fetch_node_pods_raw(node_name)
        return self._pod_parser.parse_pod_list(items)

    async def get_node(self, node_name: str) -> NodeSummary:
        item = await self._node_fetcher.fetch_node_raw(node_name)
        return self._node_parser.parse_node(item)
