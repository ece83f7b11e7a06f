"""Screen-specific keyboard bindings.

``q`` is not a priority binding: while the filter box has focus it types a
letter instead of quitting. ``enter`` is handled by the list widget itself.
"""

from typing import Annotated

# ============================================================================
# Maintenance Screen Bindings
# ============================================================================

MAINTENANCE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("space", "toggle_select", "Toggle select"),
    ("c", "toggle_cordon", "Toggle cordon"),
    ("escape", "back", "Back"),
    ("slash", "focus_filter", "Filter"),
    ("q", "quit_session", "Quit"),
]

__all__ = [
    "MAINTENANCE_SCREEN_BINDINGS",
]
