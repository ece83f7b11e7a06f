"""Maintenance screen package."""

from nodemaint.screens.maintenance.maintenance_screen import (
    MaintenanceScreen,
    WorkflowResult,
)
from nodemaint.screens.maintenance.presenter import MaintenancePresenter

__all__ = ["MaintenancePresenter", "MaintenanceScreen", "WorkflowResult"]
