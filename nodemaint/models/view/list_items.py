"""List row variants fed to the list widget.

Every row is one of three kinds, identified by its ``kind`` tag:

- NodeRow: a node on the node selection screen
- PodRow: a pod on the pod multi-select screen
- MenuEntry: an action or a Yes/No answer

Rendering code switches on ``kind``; each variant carries only its own data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from nodemaint.constants.enums import ConfirmChoice, ItemKind, MaintenanceAction
from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary


@dataclass(frozen=True)
class NodeRow:
    """Row for one node."""

    kind: ClassVar[ItemKind] = ItemKind.NODE
    node: NodeSummary

    @property
    def item_id(self) -> str:
        return f"node:{self.node.name}"

    @property
    def filter_value(self) -> str:
        return self.node.name


@dataclass(frozen=True)
class PodRow:
    """Row for one pod, carrying its reconciled selection flag."""

    kind: ClassVar[ItemKind] = ItemKind.POD
    pod: PodSummary

    @property
    def item_id(self) -> str:
        return f"pod:{self.pod.key}"

    @property
    def filter_value(self) -> str:
        return self.pod.key


@dataclass(frozen=True)
class MenuEntry:
    """Row for a menu choice (an action or a confirmation answer)."""

    kind: ClassVar[ItemKind] = ItemKind.MENU
    title: str
    description: str
    value: MaintenanceAction | ConfirmChoice

    @property
    def item_id(self) -> str:
        return f"menu:{self.value.name}"

    @property
    def filter_value(self) -> str:
        return self.title


RenderItem = Union[NodeRow, PodRow, MenuEntry]

__all__ = ["MenuEntry", "NodeRow", "PodRow", "RenderItem"]
