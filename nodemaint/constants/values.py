"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Node Maintain"

# ============================================================================
# Kubernetes labels and kinds
# ============================================================================

NODE_ROLE_LABEL_PREFIX: Final = "node-role.kubernetes.io/"
DAEMONSET_KIND: Final = "DaemonSet"
NONE_PLACEHOLDER: Final = "<none>"

# ============================================================================
# Workers
# ============================================================================

PIPELINE_WORKER_GROUP: Final = "maintenance-pipeline"

# ============================================================================
# List titles
# ============================================================================

TITLE_SELECT_NODE: Final = "Select Node"
TITLE_SELECT_ACTION: Final = "Select Operation"
TITLE_SELECT_PODS: Final = "Select Pods"
TITLE_CONFIRM_CORDON: Final = "Confirm Cordon Operation"
TITLE_CONFIRM_OPERATION: Final = "Confirm Operation"
TITLE_CONFIRM_POD_DELETION: Final = "Confirm Pod Deletion"
TITLE_CONFIRM_TOGGLE: Final = "Confirm {action} Operation"

# ============================================================================
# Menu descriptions
# ============================================================================

DESC_DRAIN_NODE: Final = "Execute drain operation"
DESC_FORCE_DELETE_NON_DS: Final = "Delete all non-DaemonSet pods"
DESC_FORCE_DELETE_SELECTED: Final = "Choose pods to delete"
DESC_BACK: Final = "Return to previous screen"
DESC_CANCEL_BACK: Final = "Cancel and go back"

# ============================================================================
# Confirmation prompts (formatted at transition time)
# ============================================================================

PROMPT_CORDON_BEFORE: Final = "Confirm cordon node {node} before {action}"
PROMPT_OPERATION: Final = "Confirm {action} on node {node}"
PROMPT_DELETE_PODS: Final = "Confirm delete {count} selected pods"
PROMPT_TOGGLE: Final = "Confirm {action} node {node}"

VERB_CORDON: Final = "cordon"
VERB_UNCORDON: Final = "uncordon"

# ============================================================================
# Status lines
# ============================================================================

STATUS_LOADING_NODES: Final = "Loading nodes..."
STATUS_LOADING_NODE: Final = "Loading node {node}..."
STATUS_CORDONING: Final = "Cordoning node {node}..."
STATUS_RUNNING: Final = "Running {action} on node {node}..."
STATUS_DELETING_PODS: Final = "Deleting {count} pods on node {node}..."
STATUS_WAITING_FOR_PIPELINES: Final = "Waiting for confirmed operations to finish..."
STATUS_COMPLETED: Final = "Operation completed. Goodbye!"
STATUS_ERROR: Final = "Error: {error}\nPress 'q' or Ctrl+C to exit"

# ============================================================================
# Help lines
# ============================================================================

HELP_SELECT_PODS: Final = (
    "↑/↓: Navigate • space: Toggle select • enter: Confirm • /: Filter • q: Quit"
)
HELP_SELECT_NODE: Final = (
    "↑/↓: Navigate • c: Toggle cordon • enter: Select • /: Filter • q: Quit"
)
HELP_NAVIGATION: Final = (
    "↑/↓: Navigate • enter: Select • esc: Back • /: Filter • q: Quit"
)

# ============================================================================
# Result lines
# ============================================================================

MSG_CORDONED: Final = "Successfully cordoned node {node}"
MSG_UNCORDONED: Final = "Successfully uncordoned node {node}"
MSG_DRAINED: Final = "Successfully drained node {node}"
MSG_POD_DELETED: Final = "Successfully deleted pod {namespace}/{name}"
MSG_POD_DELETE_FAILED: Final = "Failed to delete pod {namespace}/{name}: {error}"
MSG_NO_NODES: Final = "no nodes found in the cluster"

__all__ = [
    "APP_TITLE",
    "DAEMONSET_KIND",
    "DESC_BACK",
    "DESC_CANCEL_BACK",
    "DESC_DRAIN_NODE",
    "DESC_FORCE_DELETE_NON_DS",
    "DESC_FORCE_DELETE_SELECTED",
    "HELP_NAVIGATION",
    "HELP_SELECT_NODE",
    "HELP_SELECT_PODS",
    "MSG_CORDONED",
    "MSG_DRAINED",
    "MSG_NO_NODES",
    "MSG_POD_DELETED",
    "MSG_POD_DELETE_FAILED",
    "MSG_UNCORDONED",
    "NODE_ROLE_LABEL_PREFIX",
    "NONE_PLACEHOLDER",
    "PIPELINE_WORKER_GROUP",
    "PROMPT_CORDON_BEFORE",
    "PROMPT_DELETE_PODS",
    "PROMPT_OPERATION",
    "PROMPT_TOGGLE",
    "STATUS_COMPLETED",
    "STATUS_CORDONING",
    "STATUS_DELETING_PODS",
    "STATUS_ERROR",
    "STATUS_LOADING_NODE",
    "STATUS_LOADING_NODES",
    "STATUS_RUNNING",
    "STATUS_WAITING_FOR_PIPELINES",
    "TITLE_CONFIRM_CORDON",
    "TITLE_CONFIRM_OPERATION",
    "TITLE_CONFIRM_POD_DELETION",
    "TITLE_CONFIRM_TOGGLE",
    "TITLE_SELECT_ACTION",
    "TITLE_SELECT_NODE",
    "TITLE_SELECT_PODS",
    "VERB_CORDON",
    "VERB_UNCORDON",
]
