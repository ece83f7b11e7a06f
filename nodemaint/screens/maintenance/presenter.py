"""Maintenance screen presenter - turns workflow state into list rows and text."""

from __future__ import annotations

from collections.abc import Sequence

from nodemaint.constants.enums import ConfirmChoice, MaintenanceAction, WorkflowScreen
from nodemaint.constants.values import (
    DESC_BACK,
    DESC_CANCEL_BACK,
    DESC_DRAIN_NODE,
    DESC_FORCE_DELETE_NON_DS,
    DESC_FORCE_DELETE_SELECTED,
    HELP_NAVIGATION,
    HELP_SELECT_NODE,
    HELP_SELECT_PODS,
    NONE_PLACEHOLDER,
    STATUS_COMPLETED,
    STATUS_ERROR,
    TITLE_SELECT_ACTION,
    TITLE_SELECT_NODE,
    TITLE_SELECT_PODS,
)
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary
from nodemaint.models.view.list_items import MenuEntry, NodeRow, PodRow, RenderItem
from nodemaint.utils.duration import format_age
from nodemaint.workflow.state import WorkflowState

_ACTION_DESCRIPTIONS: dict[MaintenanceAction, str] = {
    MaintenanceAction.FORCE_DRAIN_NODE: DESC_DRAIN_NODE,
    MaintenanceAction.FORCE_DELETE_NON_DAEMONSET: DESC_FORCE_DELETE_NON_DS,
    MaintenanceAction.FORCE_DELETE_SELECTED: DESC_FORCE_DELETE_SELECTED,
    MaintenanceAction.BACK: DESC_BACK,
}

_CONFIRM_SCREENS = frozenset(
    {
        WorkflowScreen.CONFIRM_CORDON,
        WorkflowScreen.CONFIRM,
        WorkflowScreen.CONFIRM_POD,
        WorkflowScreen.CONFIRM_TOGGLE,
    }
)


class MaintenancePresenter:
    """Presenter for MaintenanceScreen - pure formatting, no widget access."""

    # =========================================================================
    # List content
    # =========================================================================

    def list_title(self, state: WorkflowState) -> str:
        if state.screen in _CONFIRM_SCREENS and state.prompt is not None:
            return state.prompt.title
        if state.screen == WorkflowScreen.SELECT_ACTION:
            return TITLE_SELECT_ACTION
        if state.screen == WorkflowScreen.SELECT_PODS:
            return TITLE_SELECT_PODS
        return TITLE_SELECT_NODE

    def list_items(self, state: WorkflowState) -> list[RenderItem]:
        """Rows for the current screen.

        Confirmation rows are built from ``state.prompt``, which the state
        machine derives from the live target when the screen is entered.
        """
        screen = state.screen
        if screen == WorkflowScreen.SELECT_NODE:
            return [NodeRow(node) for node in state.nodes]
        if screen == WorkflowScreen.SELECT_ACTION:
            return [
                MenuEntry(action.value, _ACTION_DESCRIPTIONS[action], action)
                for action in MaintenanceAction
            ]
        if screen == WorkflowScreen.SELECT_PODS:
            return [PodRow(pod) for pod in state.selection.snapshot(state.pods)]
        if screen in _CONFIRM_SCREENS and state.prompt is not None:
            return [
                MenuEntry(ConfirmChoice.YES.value, state.prompt.description, ConfirmChoice.YES),
                MenuEntry(ConfirmChoice.NO.value, DESC_CANCEL_BACK, ConfirmChoice.NO),
            ]
        return []

    @staticmethod
    def filter_items(items: Sequence[RenderItem], query: str) -> list[RenderItem]:
        """Case-insensitive substring match on each row's filter value."""
        needle = query.strip().lower()
        if not needle:
            return list(items)
        return [item for item in items if needle in item.filter_value.lower()]

    # =========================================================================
    # Row rendering
    # =========================================================================

    def render_item(self, item: RenderItem) -> tuple[str, str]:
        """Return ``(title, description)`` for one row."""
        if isinstance(item, NodeRow):
            return self._node_title(item.node), self._node_description(item.node)
        if isinstance(item, PodRow):
            return self._pod_title(item.pod), self._pod_description(item.pod)
        return item.title, item.description

    @staticmethod
    def _node_title(node: NodeSummary) -> str:
        return f"{node.name} ({'Cordoned' if node.is_cordoned else 'Schedulable'})"

    @staticmethod
    def _node_description(node: NodeSummary) -> str:
        roles = ",".join(node.roles) or NONE_PLACEHOLDER
        conditions = ",".join(node.true_conditions) or NONE_PLACEHOLDER
        return (
            f"Status: {node.status} | Roles: {roles} | Age: {format_age(node.age)} | "
            f"Version: {node.kubelet_version} | InternalIP: {node.internal_address} | "
            f"Conditions: {conditions}"
        )

    @staticmethod
    def _pod_title(pod: PodSummary) -> str:
        return f"[{'✓' if pod.selected else ' '}] {pod.name}"

    @staticmethod
    def _pod_description(pod: PodSummary) -> str:
        if pod.owner_name:
            owner = f"{pod.owner_name}({pod.owner_kind})"
        else:
            owner = NONE_PLACEHOLDER
        return (
            f"Namespace: {pod.namespace} | Phase: {pod.phase} | "
            f"Owner: {owner} | Age: {format_age(pod.age)}"
        )

    # =========================================================================
    # Status and help lines
    # =========================================================================

    def help_text(self, state: WorkflowState) -> str:
        if state.screen == WorkflowScreen.SELECT_PODS:
            return HELP_SELECT_PODS
        if state.screen == WorkflowScreen.SELECT_NODE:
            return HELP_SELECT_NODE
        return HELP_NAVIGATION

    def status_text(self, state: WorkflowState) -> str:
        if state.error:
            return STATUS_ERROR.format(error=state.error)
        if state.finished:
            return STATUS_COMPLETED
        return state.loading


__all__ = ["MaintenancePresenter"]
