"""Cluster inventory: kubectl runner, fetchers and parsers."""

from nodemaint.controllers.cluster.controller import ClusterController
from nodemaint.controllers.cluster.errors import (
    ClusterCommandError,
    MutationError,
    NodeMaintainError,
    NoNodesFoundError,
    SetupError,
)

__all__ = [
    "ClusterCommandError",
    "ClusterController",
    "MutationError",
    "NoNodesFoundError",
    "NodeMaintainError",
    "SetupError",
]
