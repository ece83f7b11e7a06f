"""Effect runner - executes one dispatch against the cluster adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from nodemaint.controllers.base import BaseController
from nodemaint.controllers.cluster.errors import NodeMaintainError
from nodemaint.controllers.maintenance.executor import (
    MaintenanceExecutor,
    PodDeletionOutcome,
)
from nodemaint.workflow.effects import (
    DeleteNonDaemonSetPods,
    DeletePods,
    DrainNode,
    Effect,
    FetchNodes,
    FetchPods,
    ResolveNode,
    SetSchedulable,
)
from nodemaint.workflow.events import (
    NodeDrained,
    NodeResolved,
    NodesLoaded,
    PodDeleteReported,
    PodsLoaded,
    ResultEvent,
    SchedulableChanged,
    WorkCompleted,
    WorkFailed,
)

logger = logging.getLogger(__name__)

PostResult = Callable[[ResultEvent], None]


class EffectRunner:
    """Runs the effects of one transition as a sequential pipeline.

    Every outcome is handed to ``post`` as a result event tagged with the
    dispatch's request id. The runner never sees workflow state.
    """

    def __init__(self, inventory: BaseController, executor: MaintenanceExecutor) -> None:
        self._inventory = inventory
        self._executor = executor

    async def run(
        self,
        request_id: int,
        effects: Sequence[Effect],
        post: PostResult,
    ) -> None:
        """Run ``effects`` in order.

        The first NodeMaintainError posts WorkFailed and ends the pipeline;
        otherwise WorkCompleted is posted after the last effect.
        """
        try:
            for effect in effects:
                await self._run_one(request_id, effect, post)
        except NodeMaintainError as e:
            logger.error("Dispatch %d failed: %s", request_id, e)
            post(WorkFailed(request_id, str(e)))
            return
        post(WorkCompleted(request_id))

    async def _run_one(self, request_id: int, effect: Effect, post: PostResult) -> None:
        def report(outcome: PodDeletionOutcome) -> None:
            post(
                PodDeleteReported(
                    request_id,
                    outcome.namespace,
                    outcome.name,
                    outcome.success,
                    outcome.message,
                )
            )

        if isinstance(effect, FetchNodes):
            nodes = await self._inventory.fetch_nodes()
            post(NodesLoaded(request_id, tuple(nodes)))
        elif isinstance(effect, FetchPods):
            pods = await self._inventory.fetch_pods(effect.node_name)
            post(PodsLoaded(request_id, effect.node_name, tuple(pods)))
        elif isinstance(effect, ResolveNode):
            node = await self._inventory.get_node(effect.node_name)
            post(NodeResolved(request_id, node))
        elif isinstance(effect, SetSchedulable):
            message = await self._executor.cordon(effect.node_name, effect.schedulable)
            post(SchedulableChanged(request_id, effect.node_name, effect.schedulable, message))
        elif isinstance(effect, DrainNode):
            message = await self._executor.drain(effect.node_name)
            post(NodeDrained(request_id, effect.node_name, message))
        elif isinstance(effect, DeleteNonDaemonSetPods):
            await self._executor.delete_non_daemonset_pods(effect.node_name, report)
        elif isinstance(effect, DeletePods):
            await self._executor.delete_pods(effect.targets, report)
        else:
            raise TypeError(f"unknown effect: {effect!r}")
