"""Immutable workflow state."""

from __future__ import annotations

from dataclasses import dataclass, field

from nodemaint.constants.enums import MaintenanceAction, WorkflowScreen
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary
from nodemaint.workflow.selection import SelectionSet


@dataclass(frozen=True)
class ConfirmPrompt:
    """Title and question of a confirmation screen."""

    title: str
    description: str


@dataclass(frozen=True)
class WorkflowState:
    """Snapshot of one maintenance session.

    Replaced on every transition. ``selection`` is the only mutable member;
    the machine copies it before changing it, so a previous state never
    observes a later toggle.

    Attributes:
        screen: Screen currently shown.
        nodes: Last fetched node list.
        pods: Last fetched pods of the selected node.
        selected_node_name: Node the operator chose on the node list.
        selected_node: Freshly resolved record of that node.
        pending_action: Action chosen on the action screen.
        selection: Pods toggled for deletion.
        prompt: Confirmation prompt, built when the confirmation screen is entered.
        loading: Status text while a dispatch is awaiting results.
        next_screen: Screen the in-flight dispatch lands on when it completes.
        request_id: Generation of the latest dispatch.
        exit_on_completion: End the session when the in-flight dispatch completes.
        output: Operator-facing result lines, printed after the session.
        error: Message of the failure that ended the workflow.
        finished: The final operation completed.
        quitting: The operator asked to quit.
    """

    screen: WorkflowScreen = WorkflowScreen.SELECT_NODE
    nodes: tuple[NodeSummary, ...] = ()
    pods: tuple[PodSummary, ...] = ()
    selected_node_name: str = ""
    selected_node: NodeSummary | None = None
    pending_action: MaintenanceAction | None = None
    selection: SelectionSet = field(default_factory=SelectionSet)
    prompt: ConfirmPrompt | None = None
    loading: str = ""
    next_screen: WorkflowScreen | None = None
    request_id: int = 0
    exit_on_completion: bool = False
    output: tuple[str, ...] = ()
    error: str = ""
    finished: bool = False
    quitting: bool = False

    @property
    def terminated(self) -> bool:
        """The session accepts no further work."""
        return self.quitting or self.finished

    @property
    def is_busy(self) -> bool:
        """Input other than quit is ignored."""
        return bool(self.loading) or bool(self.error) or self.terminated
