"""Maintenance workflow state machine.

``transition`` is a pure function of the current state and one event. It
returns the next state and the effects to run, as one sequential pipeline,
in the background. The screen that owns the session is the only caller, so
states are applied strictly in event arrival order.

Screens:

    SELECT_NODE --enter--> SELECT_ACTION --enter--> CONFIRM_CORDON
        |                                               |
        c                                  Yes (delete selected pods)
        v                                     /                  \\
    CONFIRM_TOGGLE                      SELECT_PODS            CONFIRM
                                             |
                                        CONFIRM_POD

Every Yes on a destructive confirmation re-applies the cordon as the first
effect of the same pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from nodemaint.constants.enums import ConfirmChoice, MaintenanceAction, WorkflowScreen
from nodemaint.constants.values import (
    MSG_NO_NODES,
    PROMPT_CORDON_BEFORE,
    PROMPT_DELETE_PODS,
    PROMPT_OPERATION,
    PROMPT_TOGGLE,
    STATUS_CORDONING,
    STATUS_DELETING_PODS,
    STATUS_LOADING_NODE,
    STATUS_LOADING_NODES,
    STATUS_RUNNING,
    TITLE_CONFIRM_CORDON,
    TITLE_CONFIRM_OPERATION,
    TITLE_CONFIRM_POD_DELETION,
    TITLE_CONFIRM_TOGGLE,
    VERB_CORDON,
    VERB_UNCORDON,
)
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.view.list_items import MenuEntry, NodeRow, PodRow
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
    RESULT_EVENT_TYPES,
    Back,
    NodeDrained,
    NodeResolved,
    NodesLoaded,
    PodDeleteReported,
    PodsLoaded,
    Primary,
    Quit,
    ResultEvent,
    SchedulableChanged,
    ToggleCordon,
    ToggleSelect,
    WorkCompleted,
    WorkFailed,
    WorkflowEvent,
)
from nodemaint.workflow.selection import SelectionSet
from nodemaint.workflow.state import ConfirmPrompt, WorkflowState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Next state plus the effects to dispatch under ``state.request_id``."""

    state: WorkflowState
    effects: tuple[Effect, ...] = ()


# =============================================================================
# Prompt builders
# =============================================================================


def cordon_prompt(node_name: str, action: MaintenanceAction) -> ConfirmPrompt:
    """Prompt for the mandatory cordon before ``action``."""
    if not node_name:
        raise ValueError("cordon confirmation requires a node")
    return ConfirmPrompt(
        title=TITLE_CONFIRM_CORDON,
        description=PROMPT_CORDON_BEFORE.format(node=node_name, action=action.value),
    )


def operation_prompt(node_name: str, action: MaintenanceAction) -> ConfirmPrompt:
    """Prompt for a node-wide destructive operation."""
    if not node_name:
        raise ValueError("operation confirmation requires a node")
    return ConfirmPrompt(
        title=TITLE_CONFIRM_OPERATION,
        description=PROMPT_OPERATION.format(action=action.value, node=node_name),
    )


def delete_pods_prompt(selection: SelectionSet) -> ConfirmPrompt:
    """Prompt for deleting the selected pods."""
    if not len(selection):
        raise ValueError("pod deletion confirmation requires selected pods")
    return ConfirmPrompt(
        title=TITLE_CONFIRM_POD_DELETION,
        description=PROMPT_DELETE_PODS.format(count=len(selection)),
    )


def toggle_verb(node: NodeSummary) -> str:
    """Operation that flips the node's current schedulability."""
    return VERB_CORDON if node.schedulable else VERB_UNCORDON


def toggle_prompt(node: NodeSummary) -> ConfirmPrompt:
    """Prompt for cordoning or uncordoning ``node``."""
    if not node.name:
        raise ValueError("toggle confirmation requires a node")
    verb = toggle_verb(node)
    return ConfirmPrompt(
        title=TITLE_CONFIRM_TOGGLE.format(action=verb.capitalize()),
        description=PROMPT_TOGGLE.format(action=verb, node=node.name),
    )


# =============================================================================
# Helpers
# =============================================================================


def _dispatch(
    state: WorkflowState,
    effects: tuple[Effect, ...],
    loading: str,
    next_screen: WorkflowScreen | None,
    exit_on_completion: bool = False,
    **changes: object,
) -> Transition:
    """Start a new dispatch generation; older results become stale."""
    new_state = replace(
        state,
        loading=loading,
        next_screen=next_screen,
        request_id=state.request_id + 1,
        exit_on_completion=exit_on_completion,
        **changes,
    )
    return Transition(new_state, effects)


def _stay(state: WorkflowState) -> Transition:
    return Transition(state)


def _refetch_nodes(state: WorkflowState) -> Transition:
    """Return to the node list through a fresh node fetch."""
    return _dispatch(
        state,
        (FetchNodes(),),
        STATUS_LOADING_NODES,
        WorkflowScreen.SELECT_NODE,
        selected_node_name="",
        selected_node=None,
        pending_action=None,
        prompt=None,
        pods=(),
        selection=SelectionSet(),
    )


def _back_to_actions(state: WorkflowState) -> Transition:
    return Transition(
        replace(
            state,
            screen=WorkflowScreen.SELECT_ACTION,
            pending_action=None,
            prompt=None,
            pods=(),
            selection=SelectionSet(),
        )
    )


def _choice(event: WorkflowEvent) -> ConfirmChoice | None:
    item = getattr(event, "item", None)
    if isinstance(item, MenuEntry) and isinstance(item.value, ConfirmChoice):
        return item.value
    return None


def _is_cancel(event: WorkflowEvent) -> bool:
    return isinstance(event, Back) or (
        isinstance(event, Primary) and _choice(event) is ConfirmChoice.NO
    )


def _is_confirm(event: WorkflowEvent) -> bool:
    return isinstance(event, Primary) and _choice(event) is ConfirmChoice.YES


# =============================================================================
# Input handlers, one per screen
# =============================================================================


def _on_select_node(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if not isinstance(event, (Primary, ToggleCordon)):
        return _stay(state)
    item = event.item
    if not isinstance(item, NodeRow):
        return _stay(state)
    node_name = item.node.name
    next_screen = (
        WorkflowScreen.SELECT_ACTION
        if isinstance(event, Primary)
        else WorkflowScreen.CONFIRM_TOGGLE
    )
    return _dispatch(
        state,
        (ResolveNode(node_name),),
        STATUS_LOADING_NODE.format(node=node_name),
        next_screen,
        selected_node_name=node_name,
        selected_node=None,
        pending_action=None,
        prompt=None,
    )


def _on_select_action(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if isinstance(event, Back):
        return _refetch_nodes(state)
    if not isinstance(event, Primary):
        return _stay(state)
    item = event.item
    if not isinstance(item, MenuEntry) or not isinstance(item.value, MaintenanceAction):
        return _stay(state)
    action = item.value
    if action is MaintenanceAction.BACK:
        return _refetch_nodes(state)
    return Transition(
        replace(
            state,
            screen=WorkflowScreen.CONFIRM_CORDON,
            pending_action=action,
            prompt=cordon_prompt(state.selected_node_name, action),
        )
    )


def _on_confirm_cordon(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if _is_cancel(event):
        return _back_to_actions(state)
    if not _is_confirm(event) or state.pending_action is None:
        return _stay(state)
    node_name = state.selected_node_name
    action = state.pending_action
    cordon = SetSchedulable(node_name, schedulable=False)
    loading = STATUS_CORDONING.format(node=node_name)
    if action is MaintenanceAction.FORCE_DELETE_SELECTED:
        return _dispatch(
            state,
            (cordon, FetchPods(node_name)),
            loading,
            WorkflowScreen.SELECT_PODS,
            prompt=None,
            pods=(),
            selection=SelectionSet(),
        )
    return _dispatch(
        state,
        (cordon,),
        loading,
        WorkflowScreen.CONFIRM,
        prompt=operation_prompt(node_name, action),
    )


def _on_confirm(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if _is_cancel(event):
        return _back_to_actions(state)
    if not _is_confirm(event):
        return _stay(state)
    node_name = state.selected_node_name
    action = state.pending_action
    operation: Effect
    if action is MaintenanceAction.FORCE_DRAIN_NODE:
        operation = DrainNode(node_name)
    elif action is MaintenanceAction.FORCE_DELETE_NON_DAEMONSET:
        operation = DeleteNonDaemonSetPods(node_name)
    else:
        return _stay(state)
    return _dispatch(
        state,
        (SetSchedulable(node_name, schedulable=False), operation),
        STATUS_RUNNING.format(action=action.value, node=node_name),
        None,
        exit_on_completion=True,
    )


def _on_select_pods(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if isinstance(event, Back):
        return _back_to_actions(state)
    if isinstance(event, ToggleSelect):
        item = event.item
        if not isinstance(item, PodRow):
            return _stay(state)
        listed = next((pod for pod in state.pods if pod.key == item.pod.key), None)
        if listed is None:
            return _stay(state)
        selection = state.selection.copy()
        selection.toggle(listed)
        return Transition(replace(state, selection=selection))
    if isinstance(event, Primary):
        if not len(state.selection):
            return _stay(state)
        return Transition(
            replace(
                state,
                screen=WorkflowScreen.CONFIRM_POD,
                prompt=delete_pods_prompt(state.selection),
            )
        )
    return _stay(state)


def _on_confirm_pod(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if _is_cancel(event):
        return _back_to_actions(state)
    if not _is_confirm(event) or not len(state.selection):
        return _stay(state)
    node_name = state.selected_node_name
    targets = tuple((pod.namespace, pod.name) for pod in state.selection.pods())
    return _dispatch(
        state,
        (SetSchedulable(node_name, schedulable=False), DeletePods(targets)),
        STATUS_DELETING_PODS.format(count=len(targets), node=node_name),
        None,
        exit_on_completion=True,
        selection=SelectionSet(),
    )


def _on_confirm_toggle(state: WorkflowState, event: WorkflowEvent) -> Transition:
    if _is_cancel(event):
        return _refetch_nodes(state)
    if not _is_confirm(event) or state.selected_node is None:
        return _stay(state)
    node = state.selected_node
    return _dispatch(
        state,
        (SetSchedulable(node.name, schedulable=not node.schedulable), FetchNodes()),
        STATUS_RUNNING.format(action=toggle_verb(node), node=node.name),
        WorkflowScreen.SELECT_NODE,
        selected_node_name="",
        selected_node=None,
        prompt=None,
    )


_INPUT_HANDLERS: dict[
    WorkflowScreen, Callable[[WorkflowState, WorkflowEvent], Transition]
] = {
    WorkflowScreen.SELECT_NODE: _on_select_node,
    WorkflowScreen.SELECT_ACTION: _on_select_action,
    WorkflowScreen.CONFIRM_CORDON: _on_confirm_cordon,
    WorkflowScreen.CONFIRM: _on_confirm,
    WorkflowScreen.SELECT_PODS: _on_select_pods,
    WorkflowScreen.CONFIRM_POD: _on_confirm_pod,
    WorkflowScreen.CONFIRM_TOGGLE: _on_confirm_toggle,
}


# =============================================================================
# Result handling
# =============================================================================


def _fail(state: WorkflowState, error: str) -> Transition:
    return Transition(replace(state, error=error, loading="", next_screen=None))


def _on_result(state: WorkflowState, event: ResultEvent) -> Transition:
    if event.request_id != state.request_id:
        logger.debug(
            "Discarding stale %s (request %d, current %d)",
            type(event).__name__,
            event.request_id,
            state.request_id,
        )
        return _stay(state)
    if state.error:
        return _stay(state)

    if isinstance(event, NodesLoaded):
        if not event.nodes:
            return _fail(state, MSG_NO_NODES)
        return Transition(replace(state, nodes=tuple(event.nodes)))

    if isinstance(event, PodsLoaded):
        selection = state.selection.copy()
        selection.prune(event.pods)
        return Transition(replace(state, pods=tuple(event.pods), selection=selection))

    if isinstance(event, NodeResolved):
        prompt = state.prompt
        if state.next_screen is WorkflowScreen.CONFIRM_TOGGLE:
            prompt = toggle_prompt(event.node)
        return Transition(replace(state, selected_node=event.node, prompt=prompt))

    if isinstance(event, SchedulableChanged):
        selected_node = state.selected_node
        if selected_node is not None and selected_node.name == event.node_name:
            selected_node = selected_node.model_copy(
                update={"schedulable": event.schedulable}
            )
        return Transition(
            replace(
                state,
                selected_node=selected_node,
                output=(*state.output, event.message),
            )
        )

    if isinstance(event, (NodeDrained, PodDeleteReported)):
        return Transition(replace(state, output=(*state.output, event.message)))

    if isinstance(event, WorkCompleted):
        if state.exit_on_completion:
            return Transition(
                replace(state, loading="", next_screen=None, finished=True)
            )
        screen = state.next_screen or state.screen
        return Transition(replace(state, screen=screen, loading="", next_screen=None))

    if isinstance(event, WorkFailed):
        return _fail(state, event.error)

    return _stay(state)


# =============================================================================
# Entry points
# =============================================================================


def start() -> Transition:
    """Initial state: the node list, with its first fetch dispatched."""
    return _dispatch(
        WorkflowState(),
        (FetchNodes(),),
        STATUS_LOADING_NODES,
        WorkflowScreen.SELECT_NODE,
    )


def transition(state: WorkflowState, event: WorkflowEvent) -> Transition:
    """Apply one event to ``state``.

    Quit is honored in every state and never produces effects. After the
    session terminated every other event is ignored. While a dispatch is in
    flight, or after a failure, input events are ignored.
    """
    if isinstance(event, Quit):
        if state.quitting:
            return _stay(state)
        return Transition(replace(state, quitting=True))
    if state.terminated:
        return _stay(state)
    if isinstance(event, RESULT_EVENT_TYPES):
        return _on_result(state, event)
    if state.is_busy:
        return _stay(state)
    return _INPUT_HANDLERS[state.screen](state, event)


__all__ = [
    "Transition",
    "cordon_prompt",
    "delete_pods_prompt",
    "operation_prompt",
    "start",
    "toggle_prompt",
    "toggle_verb",
    "transition",
]
