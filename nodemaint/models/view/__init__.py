"""View models for list rendering."""

from nodemaint.models.view.list_items import MenuEntry, NodeRow, PodRow, RenderItem

__all__ = ["MenuEntry", "NodeRow", "PodRow", "RenderItem"]
