"""Tests for the maintenance workflow state machine."""

from __future__ import annotations

from dataclasses import replace

import pytest

from nodemaint.constants.enums import ConfirmChoice, MaintenanceAction, WorkflowScreen
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary
from nodemaint.models.view.list_items import MenuEntry, NodeRow, PodRow
from nodemaint.workflow.effects import (
    DESTRUCTIVE_EFFECTS,
    DeleteNonDaemonSetPods,
    DeletePods,
    DrainNode,
    FetchNodes,
    FetchPods,
    ResolveNode,
    SetSchedulable,
)
from nodemaint.workflow.events import (
    Back,
    NodeDrained,
    NodeResolved,
    NodesLoaded,
    PodDeleteReported,
    PodsLoaded,
    Primary,
    Quit,
    SchedulableChanged,
    ToggleCordon,
    ToggleSelect,
    WorkCompleted,
    WorkFailed,
    WorkflowEvent,
)
from nodemaint.workflow.machine import (
    Transition,
    cordon_prompt,
    delete_pods_prompt,
    operation_prompt,
    start,
    toggle_prompt,
    transition,
)
from nodemaint.workflow.selection import SelectionSet
from nodemaint.workflow.state import WorkflowState

WORKER_1 = NodeSummary(name="worker-1", ready=True, schedulable=True)
WORKER_2 = NodeSummary(name="worker-2", ready=True, schedulable=False)
POD_A = PodSummary(name="pod-a", namespace="ns1", owner_name="a-rs", owner_kind="ReplicaSet")
POD_B = PodSummary(name="pod-b", namespace="ns1", owner_name="b-rs", owner_kind="ReplicaSet")
POD_C = PodSummary(name="pod-c", namespace="ns2")

YES = Primary(MenuEntry("Yes", "", ConfirmChoice.YES))
NO = Primary(MenuEntry("No", "", ConfirmChoice.NO))


def _action(action: MaintenanceAction) -> Primary:
    return Primary(MenuEntry(action.value, "", action))


def _apply(state: WorkflowState, *events: WorkflowEvent) -> WorkflowState:
    for event in events:
        state = transition(state, event).state
    return state


def _node_list(*nodes: NodeSummary) -> WorkflowState:
    """State showing the node list after the initial fetch."""
    state = start().state
    rid = state.request_id
    return _apply(state, NodesLoaded(rid, nodes or (WORKER_1,)), WorkCompleted(rid))


def _action_menu(node: NodeSummary = WORKER_1) -> WorkflowState:
    step = transition(_node_list(node, WORKER_2), Primary(NodeRow(node)))
    rid = step.state.request_id
    return _apply(step.state, NodeResolved(rid, node), WorkCompleted(rid))


def _confirm_cordon(action: MaintenanceAction) -> WorkflowState:
    return _apply(_action_menu(), _action(action))


def _pod_select(*pods: PodSummary) -> WorkflowState:
    step = transition(_confirm_cordon(MaintenanceAction.FORCE_DELETE_SELECTED), YES)
    rid = step.state.request_id
    return _apply(
        step.state,
        SchedulableChanged(rid, "worker-1", False, "Successfully cordoned node worker-1"),
        PodsLoaded(rid, "worker-1", pods or (POD_A, POD_B, POD_C)),
        WorkCompleted(rid),
    )


def _cordons(step: Transition) -> list[SetSchedulable]:
    return [e for e in step.effects if isinstance(e, SetSchedulable)]


class TestStart:
    """Tests for the initial state."""

    def test_start_fetches_nodes(self) -> None:
        step = start()
        assert step.effects == (FetchNodes(),)
        assert step.state.screen == WorkflowScreen.SELECT_NODE
        assert step.state.loading
        assert step.state.request_id == 1

    def test_nodes_loaded_fill_the_list(self) -> None:
        state = _node_list(WORKER_1, WORKER_2)
        assert state.nodes == (WORKER_1, WORKER_2)
        assert state.loading == ""
        assert state.is_busy is False

    def test_zero_nodes_is_an_error(self) -> None:
        """A fetch returning zero nodes always yields the error state."""
        state = start().state
        state = _apply(state, NodesLoaded(state.request_id, ()))
        assert state.error == "no nodes found in the cluster"
        assert state.loading == ""

    def test_zero_nodes_after_refresh_is_an_error(self) -> None:
        step = transition(_action_menu(), Back())
        state = _apply(step.state, NodesLoaded(step.state.request_id, ()))
        assert state.error == "no nodes found in the cluster"


class TestSelectNode:
    """Tests for the node list screen."""

    def test_enter_resolves_node_then_shows_actions(self) -> None:
        step = transition(_node_list(), Primary(NodeRow(WORKER_1)))

        assert step.effects == (ResolveNode("worker-1"),)
        assert step.state.selected_node_name == "worker-1"
        assert step.state.next_screen == WorkflowScreen.SELECT_ACTION
        assert step.state.screen == WorkflowScreen.SELECT_NODE

        rid = step.state.request_id
        state = _apply(step.state, NodeResolved(rid, WORKER_1), WorkCompleted(rid))
        assert state.screen == WorkflowScreen.SELECT_ACTION
        assert state.selected_node == WORKER_1

    def test_enter_without_a_row_is_ignored(self) -> None:
        state = _node_list()
        step = transition(state, Primary(None))
        assert step.state == state
        assert step.effects == ()

    def test_space_is_ignored(self) -> None:
        state = _node_list()
        assert transition(state, ToggleSelect(NodeRow(WORKER_1))).effects == ()

    def test_input_while_loading_is_ignored(self) -> None:
        """Only quit is honored while a dispatch is in flight."""
        state = start().state
        step = transition(state, Primary(NodeRow(WORKER_1)))
        assert step.state == state
        assert step.effects == ()


class TestToggleCordon:
    """Tests for the cordon toggle path."""

    def _confirm_toggle(self, node: NodeSummary) -> WorkflowState:
        step = transition(_node_list(node), ToggleCordon(NodeRow(node)))
        assert step.effects == (ResolveNode(node.name),)
        rid = step.state.request_id
        return _apply(step.state, NodeResolved(rid, node), WorkCompleted(rid))

    def test_toggle_prompt_for_schedulable_node(self) -> None:
        state = self._confirm_toggle(WORKER_1)
        assert state.screen == WorkflowScreen.CONFIRM_TOGGLE
        assert state.prompt is not None
        assert state.prompt.title == "Confirm Cordon Operation"
        assert state.prompt.description == "Confirm cordon node worker-1"

    def test_toggle_prompt_for_cordoned_node(self) -> None:
        state = self._confirm_toggle(WORKER_2)
        assert state.prompt is not None
        assert state.prompt.description == "Confirm uncordon node worker-2"

    def test_cordon_then_refreshed_list(self) -> None:
        """c, Yes: one cordon with schedulable=False, then a refreshed node list."""
        step = transition(self._confirm_toggle(WORKER_1), YES)

        assert step.effects == (SetSchedulable("worker-1", schedulable=False), FetchNodes())
        rid = step.state.request_id
        cordoned = WORKER_1.model_copy(update={"schedulable": False})
        state = _apply(
            step.state,
            SchedulableChanged(rid, "worker-1", False, "Successfully cordoned node worker-1"),
            NodesLoaded(rid, (cordoned,)),
            WorkCompleted(rid),
        )

        assert state.screen == WorkflowScreen.SELECT_NODE
        assert state.nodes[0].schedulable is False
        assert state.output == ("Successfully cordoned node worker-1",)
        assert state.finished is False

    def test_uncordon(self) -> None:
        step = transition(self._confirm_toggle(WORKER_2), YES)
        assert step.effects[0] == SetSchedulable("worker-2", schedulable=True)

    @pytest.mark.parametrize("event", [NO, Back()])
    def test_cancel_refetches_nodes(self, event: WorkflowEvent) -> None:
        step = transition(self._confirm_toggle(WORKER_1), event)
        assert step.effects == (FetchNodes(),)
        assert step.state.next_screen == WorkflowScreen.SELECT_NODE


class TestSelectAction:
    """Tests for the action menu."""

    def test_action_goes_to_cordon_confirmation(self) -> None:
        state = _confirm_cordon(MaintenanceAction.FORCE_DRAIN_NODE)

        assert state.screen == WorkflowScreen.CONFIRM_CORDON
        assert state.pending_action == MaintenanceAction.FORCE_DRAIN_NODE
        assert state.prompt is not None
        assert state.prompt.description == "Confirm cordon node worker-1 before Force Drain node"

    def test_back_entry_refetches_nodes(self) -> None:
        step = transition(_action_menu(), _action(MaintenanceAction.BACK))
        assert step.effects == (FetchNodes(),)
        assert step.state.selected_node_name == ""

    def test_escape_refetches_nodes(self) -> None:
        step = transition(_action_menu(), Back())
        assert step.effects == (FetchNodes(),)
        rid = step.state.request_id
        state = _apply(step.state, NodesLoaded(rid, (WORKER_1,)), WorkCompleted(rid))
        assert state.screen == WorkflowScreen.SELECT_NODE

    def test_prompt_names_the_live_target(self) -> None:
        """Choosing another node rebuilds the prompt for that node."""
        state = _apply(_action_menu(WORKER_2), _action(MaintenanceAction.FORCE_DRAIN_NODE))
        assert state.prompt is not None
        assert "worker-2" in state.prompt.description
        assert "worker-1" not in state.prompt.description


class TestConfirmCordon:
    """Tests for the mandatory cordon confirmation."""

    def test_yes_cordons_then_confirms_operation(self) -> None:
        step = transition(_confirm_cordon(MaintenanceAction.FORCE_DRAIN_NODE), YES)

        assert step.effects == (SetSchedulable("worker-1", schedulable=False),)
        rid = step.state.request_id
        state = _apply(
            step.state,
            SchedulableChanged(rid, "worker-1", False, "Successfully cordoned node worker-1"),
            WorkCompleted(rid),
        )
        assert state.screen == WorkflowScreen.CONFIRM
        assert state.prompt is not None
        assert state.prompt.description == "Confirm Force Drain node on node worker-1"

    def test_yes_for_selected_pods_fetches_pods(self) -> None:
        step = transition(_confirm_cordon(MaintenanceAction.FORCE_DELETE_SELECTED), YES)
        assert step.effects == (
            SetSchedulable("worker-1", schedulable=False),
            FetchPods("worker-1"),
        )
        assert step.state.next_screen == WorkflowScreen.SELECT_PODS

    @pytest.mark.parametrize("event", [NO, Back()])
    def test_cancel_returns_to_actions(self, event: WorkflowEvent) -> None:
        step = transition(_confirm_cordon(MaintenanceAction.FORCE_DRAIN_NODE), event)
        assert step.effects == ()
        assert step.state.screen == WorkflowScreen.SELECT_ACTION
        assert step.state.pending_action is None


class TestConfirmOperation:
    """Tests for the node-wide destructive confirmations."""

    def _confirm(self, action: MaintenanceAction) -> WorkflowState:
        step = transition(_confirm_cordon(action), YES)
        rid = step.state.request_id
        return _apply(step.state, WorkCompleted(rid))

    def test_drain_recordons_first_and_exits(self) -> None:
        step = transition(self._confirm(MaintenanceAction.FORCE_DRAIN_NODE), YES)

        assert step.effects == (
            SetSchedulable("worker-1", schedulable=False),
            DrainNode("worker-1"),
        )
        assert step.state.exit_on_completion is True
        rid = step.state.request_id
        state = _apply(
            step.state,
            SchedulableChanged(rid, "worker-1", False, "Successfully cordoned node worker-1"),
            NodeDrained(rid, "worker-1", "Successfully drained node worker-1"),
            WorkCompleted(rid),
        )
        assert state.finished is True
        assert state.terminated is True
        assert state.output[-1] == "Successfully drained node worker-1"

    def test_delete_non_daemonset(self) -> None:
        step = transition(self._confirm(MaintenanceAction.FORCE_DELETE_NON_DAEMONSET), YES)
        assert step.effects == (
            SetSchedulable("worker-1", schedulable=False),
            DeleteNonDaemonSetPods("worker-1"),
        )

    @pytest.mark.parametrize("event", [NO, Back()])
    def test_cancel_returns_to_actions(self, event: WorkflowEvent) -> None:
        step = transition(self._confirm(MaintenanceAction.FORCE_DRAIN_NODE), event)
        assert step.effects == ()
        assert step.state.screen == WorkflowScreen.SELECT_ACTION


class TestSelectPods:
    """Tests for the pod multi-select screen and its confirmation."""

    def test_pods_loaded(self) -> None:
        state = _pod_select()
        assert state.screen == WorkflowScreen.SELECT_PODS
        assert [p.key for p in state.pods] == ["ns1/pod-a", "ns1/pod-b", "ns2/pod-c"]
        assert len(state.selection) == 0

    def test_space_toggles_highlighted_pod(self) -> None:
        before = _pod_select()
        after = _apply(before, ToggleSelect(PodRow(POD_A)))

        assert "ns1/pod-a" in after.selection
        assert "ns1/pod-a" not in before.selection
        assert len(_apply(after, ToggleSelect(PodRow(POD_A))).selection) == 0

    def test_toggle_of_unlisted_pod_is_ignored(self) -> None:
        ghost = PodSummary(name="ghost", namespace="ns1")
        assert len(_apply(_pod_select(), ToggleSelect(PodRow(ghost))).selection) == 0

    def test_enter_with_empty_selection_stays(self) -> None:
        state = _pod_select()
        step = transition(state, Primary(PodRow(POD_A)))
        assert step.state.screen == WorkflowScreen.SELECT_PODS

    def test_selected_pods_deleted_in_toggle_order(self) -> None:
        """Select pod-b then pod-a, Yes: two deletes in toggle order, no drain."""
        state = _apply(
            _pod_select(),
            ToggleSelect(PodRow(POD_B)),
            ToggleSelect(PodRow(POD_A)),
            Primary(PodRow(POD_A)),
        )
        assert state.screen == WorkflowScreen.CONFIRM_POD
        assert state.prompt is not None
        assert state.prompt.description == "Confirm delete 2 selected pods"

        step = transition(state, YES)

        assert step.effects == (
            SetSchedulable("worker-1", schedulable=False),
            DeletePods((("ns1", "pod-b"), ("ns1", "pod-a"))),
        )
        assert not any(isinstance(e, DrainNode) for e in step.effects)
        assert len(step.state.selection) == 0

        rid = step.state.request_id
        final = _apply(
            step.state,
            SchedulableChanged(rid, "worker-1", False, "Successfully cordoned node worker-1"),
            PodDeleteReported(rid, "ns1", "pod-b", True, "Successfully deleted pod ns1/pod-b"),
            PodDeleteReported(rid, "ns1", "pod-a", False, "Failed to delete pod ns1/pod-a: gone"),
            WorkCompleted(rid),
        )
        assert final.finished is True
        assert final.output[1:] == (
            "Successfully deleted pod ns1/pod-b",
            "Failed to delete pod ns1/pod-a: gone",
        )

    def test_escape_clears_selection(self) -> None:
        state = _apply(_pod_select(), ToggleSelect(PodRow(POD_A)), Back())
        assert state.screen == WorkflowScreen.SELECT_ACTION
        assert len(state.selection) == 0
        assert state.pods == ()

    @pytest.mark.parametrize("event", [NO, Back()])
    def test_cancel_pod_confirmation_clears_selection(self, event: WorkflowEvent) -> None:
        state = _apply(
            _pod_select(), ToggleSelect(PodRow(POD_A)), Primary(None), event
        )
        assert state.screen == WorkflowScreen.SELECT_ACTION
        assert len(state.selection) == 0

    def test_pod_fetch_prunes_selection(self) -> None:
        """Keys no longer listed are dropped when pods are loaded."""
        selection = SelectionSet()
        selection.toggle(POD_A)
        selection.toggle(PodSummary(name="gone", namespace="ns1"))
        state = replace(_pod_select(), selection=selection, loading="Loading pods...", request_id=40)

        state = _apply(state, PodsLoaded(40, "worker-1", (POD_A, POD_B)))

        assert list(state.selection) == ["ns1/pod-a"]


class TestSafetyProperties:
    """Cross-cutting guarantees of the workflow."""

    def _destructive_steps(self) -> list[Transition]:
        steps = []
        for action in (
            MaintenanceAction.FORCE_DRAIN_NODE,
            MaintenanceAction.FORCE_DELETE_NON_DAEMONSET,
        ):
            step = transition(_confirm_cordon(action), YES)
            state = _apply(step.state, WorkCompleted(step.state.request_id))
            steps.append(transition(state, YES))
        pods_confirm = _apply(_pod_select(), ToggleSelect(PodRow(POD_C)), Primary(None))
        steps.append(transition(pods_confirm, YES))
        return steps

    def test_every_destructive_dispatch_cordons_exactly_once_first(self) -> None:
        for step in self._destructive_steps():
            destructive = [e for e in step.effects if isinstance(e, DESTRUCTIVE_EFFECTS)]
            assert len(destructive) == 1
            cordons = _cordons(step)
            assert cordons == [SetSchedulable("worker-1", schedulable=False)]
            assert step.effects[0] == cordons[0]

    @pytest.mark.parametrize("screen", list(WorkflowScreen))
    def test_quit_from_every_state(self, screen: WorkflowScreen) -> None:
        """Quit terminates from any of the seven states without effects."""
        state = replace(_action_menu(), screen=screen)
        step = transition(state, Quit())
        assert step.effects == ()
        assert step.state.quitting is True
        assert step.state.terminated is True

    def test_quit_while_loading_and_on_error(self) -> None:
        loading = start().state
        failed = _apply(loading, WorkFailed(loading.request_id, "boom"))
        for state in (loading, failed):
            step = transition(state, Quit())
            assert step.state.quitting is True
            assert step.effects == ()

    def test_stale_results_are_discarded(self) -> None:
        """Results from a superseded dispatch do not change the state."""
        step = transition(_node_list(WORKER_1, WORKER_2), Primary(NodeRow(WORKER_1)))
        stale_rid = step.state.request_id - 1
        state = _apply(step.state, NodeResolved(stale_rid, WORKER_2), WorkCompleted(stale_rid))
        assert state == step.state

    def test_failure_is_terminal_except_for_quit(self) -> None:
        step = transition(_confirm_cordon(MaintenanceAction.FORCE_DRAIN_NODE), YES)
        rid = step.state.request_id
        state = _apply(step.state, WorkFailed(rid, "failed to cordon node worker-1: forbidden"))

        assert state.error == "failed to cordon node worker-1: forbidden"
        assert state.loading == ""
        for event in (YES, NO, Back(), ToggleCordon(None)):
            assert transition(state, event).state == state
        assert _apply(state, WorkCompleted(rid)).error == state.error

    def test_results_after_termination_are_discarded(self) -> None:
        step = transition(_node_list(), Primary(NodeRow(WORKER_1)))
        quitting = _apply(step.state, Quit())
        rid = step.state.request_id
        assert _apply(quitting, NodeResolved(rid, WORKER_1), WorkCompleted(rid)) == quitting

    def test_states_are_not_mutated_by_later_toggles(self) -> None:
        before = _pod_select()
        _apply(before, ToggleSelect(PodRow(POD_A)), ToggleSelect(PodRow(POD_B)))
        assert len(before.selection) == 0


class TestPromptBuilders:
    """Prompt builders refuse to build a prompt without a target."""

    def test_cordon_prompt_requires_node(self) -> None:
        with pytest.raises(ValueError):
            cordon_prompt("", MaintenanceAction.FORCE_DRAIN_NODE)

    def test_operation_prompt_requires_node(self) -> None:
        with pytest.raises(ValueError):
            operation_prompt("", MaintenanceAction.FORCE_DRAIN_NODE)

    def test_delete_pods_prompt_requires_selection(self) -> None:
        with pytest.raises(ValueError):
            delete_pods_prompt(SelectionSet())

    def test_toggle_prompt_requires_node(self) -> None:
        with pytest.raises(ValueError):
            toggle_prompt(NodeSummary(name=""))
