"""Controllers for cluster inventory and maintenance operations."""

from nodemaint.controllers.base import BaseController
from nodemaint.controllers.cluster import ClusterController
from nodemaint.controllers.maintenance import MaintenanceExecutor

__all__ = [
    "BaseController",
    "ClusterController",
    "MaintenanceExecutor",
]
