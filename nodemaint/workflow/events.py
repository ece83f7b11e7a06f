"""Events consumed by the state machine.

Input events come from the keyboard (or mouse) and carry the row that was
highlighted when the key was pressed. Result events come from background
pipelines and carry the ``request_id`` of the dispatch that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary
from nodemaint.models.view.list_items import RenderItem

# =============================================================================
# Input events
# =============================================================================


@dataclass(frozen=True)
class Primary:
    """``enter`` (or a click) on the highlighted row."""

    item: RenderItem | None = None


@dataclass(frozen=True)
class ToggleSelect:
    """``space`` on the highlighted row."""

    item: RenderItem | None = None


@dataclass(frozen=True)
class ToggleCordon:
    """``c`` on the highlighted row."""

    item: RenderItem | None = None


@dataclass(frozen=True)
class Back:
    """``esc``."""


@dataclass(frozen=True)
class Quit:
    """``q`` or ``ctrl+c``; honored in every state."""


InputEvent = Union[Primary, ToggleSelect, ToggleCordon, Back, Quit]

# =============================================================================
# Result events
# =============================================================================


@dataclass(frozen=True)
class NodesLoaded:
    request_id: int
    nodes: tuple[NodeSummary, ...]


@dataclass(frozen=True)
class PodsLoaded:
    request_id: int
    node_name: str
    pods: tuple[PodSummary, ...]


@dataclass(frozen=True)
class NodeResolved:
    request_id: int
    node: NodeSummary


@dataclass(frozen=True)
class SchedulableChanged:
    request_id: int
    node_name: str
    schedulable: bool
    message: str


@dataclass(frozen=True)
class NodeDrained:
    request_id: int
    node_name: str
    message: str


@dataclass(frozen=True)
class PodDeleteReported:
    """One attempt of a batch deletion, successful or not."""

    request_id: int
    namespace: str
    name: str
    success: bool
    message: str


@dataclass(frozen=True)
class WorkCompleted:
    """Every effect of the dispatch finished."""

    request_id: int


@dataclass(frozen=True)
class WorkFailed:
    """An effect failed; the rest of the dispatch was not run."""

    request_id: int
    error: str


ResultEvent = Union[
    NodesLoaded,
    PodsLoaded,
    NodeResolved,
    SchedulableChanged,
    NodeDrained,
    PodDeleteReported,
    WorkCompleted,
    WorkFailed,
]

RESULT_EVENT_TYPES = (
    NodesLoaded,
    PodsLoaded,
    NodeResolved,
    SchedulableChanged,
    NodeDrained,
    PodDeleteReported,
    WorkCompleted,
    WorkFailed,
)

WorkflowEvent = Union[InputEvent, ResultEvent]

__all__ = [
    "RESULT_EVENT_TYPES",
    "Back",
    "InputEvent",
    "NodeDrained",
    "NodeResolved",
    "NodesLoaded",
    "PodDeleteReported",
    "PodsLoaded",
    "Primary",
    "Quit",
    "ResultEvent",
    "SchedulableChanged",
    "ToggleCordon",
    "ToggleSelect",
    "WorkCompleted",
    "WorkFailed",
    "WorkflowEvent",
]
