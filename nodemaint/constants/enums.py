"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================

class NodeStatus(Enum):
    """Node readiness values as shown to the operator."""

    READY = "Ready"
    NOT_READY = "NotReady"


# =============================================================================
# Workflow Enums
# =============================================================================

class WorkflowScreen(Enum):
    """The seven screens of the maintenance workflow."""

    SELECT_NODE = "selectNode"
    SELECT_ACTION = "selectAction"
    CONFIRM_CORDON = "confirmCordon"
    CONFIRM_TOGGLE = "confirmToggle"
    CONFIRM = "confirm"
    SELECT_PODS = "selectPods"
    CONFIRM_POD = "confirmPod"


class MaintenanceAction(Enum):
    """Operations offered on the action screen, in menu order."""

    FORCE_DRAIN_NODE = "Force Drain node"
    FORCE_DELETE_NON_DAEMONSET = "Force delete non-daemonset pods"
    FORCE_DELETE_SELECTED = "Force delete selected pods"
    BACK = "Back"


class ConfirmChoice(Enum):
    """Answers offered on every confirmation screen."""

    YES = "Yes"
    NO = "No"


# =============================================================================
# Render Item Enums
# =============================================================================

class ItemKind(Enum):
    """Tag for the list row variants."""

    NODE = "node"
    POD = "pod"
    MENU = "menu"


__all__ = [
    "ConfirmChoice",
    "ItemKind",
    "MaintenanceAction",
    "NodeStatus",
    "WorkflowScreen",
]
