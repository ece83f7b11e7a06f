"""Maintenance workflow: state, events, effects and the transition function."""

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
)
from nodemaint.workflow.machine import Transition, start, transition
from nodemaint.workflow.runner import EffectRunner
from nodemaint.workflow.selection import SelectionSet
from nodemaint.workflow.state import ConfirmPrompt, WorkflowState

__all__ = [
    "Back",
    "ConfirmPrompt",
    "DeleteNonDaemonSetPods",
    "DeletePods",
    "DrainNode",
    "Effect",
    "EffectRunner",
    "FetchNodes",
    "FetchPods",
    "NodeDrained",
    "NodeResolved",
    "NodesLoaded",
    "PodDeleteReported",
    "PodsLoaded",
    "Primary",
    "Quit",
    "ResolveNode",
    "SchedulableChanged",
    "SelectionSet",
    "SetSchedulable",
    "ToggleCordon",
    "ToggleSelect",
    "Transition",
    "WorkCompleted",
    "WorkFailed",
    "WorkflowState",
    "start",
    "transition",
]
