"""Exception hierarchy for cluster access and maintenance operations."""

from __future__ import annotations

from nodemaint.constants.values import MSG_NO_NODES


class NodeMaintainError(Exception):
    """Base exception for all cluster-facing failures."""


class SetupError(NodeMaintainError):
    """kubectl or the kubeconfig cannot be used; raised before the UI starts."""


class ClusterCommandError(NodeMaintainError):
    """kubectl exited non-zero or timed out.

    The message is kubectl's stderr, unmodified.
    """


class NoNodesFoundError(ClusterCommandError):
    """The cluster reported zero nodes."""

    def __init__(self, message: str = MSG_NO_NODES) -> None:
        super().__init__(message)


class MutationError(NodeMaintainError):
    """A cordon, drain or delete failed for a specific target."""

    def __init__(self, operation: str, target: str, message: str) -> None:
        super().__init__(f"failed to {operation} {target}: {message}")
        self.operation = operation
        self.target = target
        self.message = message


__all__ = [
    "ClusterCommandError",
    "MutationError",
    "NoNodesFoundError",
    "NodeMaintainError",
    "SetupError",
]
