"""Constants module for the node maintenance TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (titles, prompts, help lines, result lines)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in nodemaint.keyboard module.
"""

from nodemaint.constants.enums import (
    ConfirmChoice,
    ItemKind,
    MaintenanceAction,
    NodeStatus,
    WorkflowScreen,
)
from nodemaint.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT_SECONDS,
    KUBECTL_COMMAND_TIMEOUT,
)
from nodemaint.constants.values import APP_TITLE

__all__ = [
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT_SECONDS",
    "KUBECTL_COMMAND_TIMEOUT",
    "ConfirmChoice",
    "ItemKind",
    "MaintenanceAction",
    "NodeStatus",
    "WorkflowScreen",
]
