"""Maintenance executor - cordon, drain and pod deletion through kubectl.

Each single-target operation is one blocking kubectl call awaited from a
worker. Success returns the operator-facing confirmation line; failure raises
MutationError carrying the target. Batch deletions never raise for a single
pod: every attempt is reported as a PodDeletionOutcome and the batch goes on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from nodemaint.constants.values import (
    MSG_CORDONED,
    MSG_DRAINED,
    MSG_POD_DELETE_FAILED,
    MSG_POD_DELETED,
    MSG_UNCORDONED,
    VERB_CORDON,
    VERB_UNCORDON,
)
from nodemaint.controllers.base import BaseController
from nodemaint.controllers.cluster.errors import ClusterCommandError, MutationError
from nodemaint.controllers.cluster.fetchers.node_fetcher import RunKubectl
from nodemaint.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PodDeletionOutcome:
    """Result of one delete attempt inside a batch."""

    namespace: str
    name: str
    success: bool
    message: str

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"


OutcomeCallback = Callable[[PodDeletionOutcome], None]


class MaintenanceExecutor:
    """Issues node and pod mutations."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        inventory: BaseController,
        settings: AppSettings | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            inventory: Used by composite operations to list a node's pods
            settings: Drain and delete options
        """
        self._run_kubectl = run_kubectl_func
        self._inventory = inventory
        self._settings = settings or AppSettings()

    # =========================================================================
    # Argument builders
    # =========================================================================

    def _request_timeout_arg(self) -> str:
        return f"--request-timeout={self._settings.request_timeout_seconds}s"

    def _build_cordon_args(self, node_name: str, schedulable: bool) -> tuple[str, ...]:
        verb = VERB_UNCORDON if schedulable else VERB_CORDON
        return (verb, node_name, self._request_timeout_arg())

    def _build_drain_args(self, node_name: str) -> tuple[str, ...]:
        settings = self._settings
        args = ["drain", node_name]
        if settings.drain_force:
            args.append("--force")
        if settings.drain_ignore_daemonsets:
            args.append("--ignore-daemonsets")
        if settings.drain_delete_emptydir_data:
            args.append("--delete-emptydir-data")
        args.append(f"--grace-period={settings.drain_grace_period_seconds}")
        args.append(f"--timeout={settings.drain_timeout_seconds}s")
        return tuple(args)

    def _build_delete_pod_args(self, namespace: str, name: str) -> tuple[str, ...]:
        grace_period = self._settings.pod_delete_grace_period_seconds
        args = ["delete", "pod", name, "-n", namespace, f"--grace-period={grace_period}"]
        if grace_period == 0:
            # kubectl only accepts an immediate deletion together with --force
            args.append("--force")
        args.extend(["--wait=false", self._request_timeout_arg()])
        return tuple(args)

    # =========================================================================
    # Single-target operations
    # =========================================================================

    async def cordon(self, node_name: str, schedulable: bool) -> str:
        """Set the node's schedulability (False cordons, True uncordons)."""
        verb = VERB_UNCORDON if schedulable else VERB_CORDON
        try:
            await self._run_kubectl(self._build_cordon_args(node_name, schedulable))
        except ClusterCommandError as e:
            raise MutationError(verb, f"node {node_name}", str(e)) from e
        message = (MSG_UNCORDONED if schedulable else MSG_CORDONED).format(node=node_name)
        logger.info(message)
        return message

    async def drain(self, node_name: str) -> str:
        """Evict or delete every drainable pod on the node."""
        try:
            await self._run_kubectl(self._build_drain_args(node_name))
        except ClusterCommandError as e:
            raise MutationError("drain", f"node {node_name}", str(e)) from e
        message = MSG_DRAINED.format(node=node_name)
        logger.info(message)
        return message

    async def delete_pod(self, namespace: str, name: str) -> str:
        """Force delete one pod."""
        try:
            await self._run_kubectl(self._build_delete_pod_args(namespace, name))
        except ClusterCommandError as e:
            raise MutationError("delete", f"pod {namespace}/{name}", str(e)) from e
        message = MSG_POD_DELETED.format(namespace=namespace, name=name)
        logger.info(message)
        return message

    # =========================================================================
    # Batch operations
    # =========================================================================

    async def delete_pods(
        self,
        targets: Sequence[tuple[str, str]],
        on_outcome: OutcomeCallback | None = None,
    ) -> list[PodDeletionOutcome]:
        """Delete pods one after another in the given order.

        Args:
            targets: ``(namespace, name)`` pairs
            on_outcome: Called with each outcome as soon as it is known

        Returns:
            One outcome per target, in target order.
        """
        outcomes: list[PodDeletionOutcome] = []
        for namespace, name in targets:
            try:
                message = await self.delete_pod(namespace, name)
            except MutationError as e:
                outcome = PodDeletionOutcome(
                    namespace=namespace,
                    name=name,
                    success=False,
                    message=MSG_POD_DELETE_FAILED.format(
                        namespace=namespace, name=name, error=e.message
                    ),
                )
                logger.warning(outcome.message)
            else:
                outcome = PodDeletionOutcome(
                    namespace=namespace, name=name, success=True, message=message
                )
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
        return outcomes

    async def delete_non_daemonset_pods(
        self,
        node_name: str,
        on_outcome: OutcomeCallback | None = None,
    ) -> list[PodDeletionOutcome]:
        """Delete every pod on the node that no DaemonSet controls.

        Raises:
            MutationError: the node's pods could not be listed.
        """
        try:
            pods = await self._inventory.fetch_pods(node_name)
        except ClusterCommandError as e:
            raise MutationError("get pods on", f"node {node_name}", str(e)) from e

        targets = [(pod.namespace, pod.name) for pod in pods if not pod.is_daemonset_owned]
        logger.info(
            "Deleting %d non-daemonset pods on node %s (%d daemonset pods skipped)",
            len(targets),
            node_name,
            len(pods) - len(targets),
        )
        return await self.delete_pods(targets, on_outcome)
