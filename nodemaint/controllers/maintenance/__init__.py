"""Node and pod mutations."""

from nodemaint.controllers.maintenance.executor import (
    MaintenanceExecutor,
    OutcomeCallback,
    PodDeletionOutcome,
)

__all__ = ["MaintenanceExecutor", "OutcomeCallback", "PodDeletionOutcome"]
