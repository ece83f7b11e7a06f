"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from nodemaint.keyboard.app import APP_BINDINGS
from nodemaint.keyboard.navigation import MAINTENANCE_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "MAINTENANCE_SCREEN_BINDINGS",
]
