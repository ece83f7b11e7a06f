"""Screens for the node maintenance TUI."""

from nodemaint.screens.maintenance import MaintenanceScreen

__all__ = ["MaintenanceScreen"]
