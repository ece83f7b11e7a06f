"""Data models for the node maintenance TUI."""

from nodemaint.models.core import NodeSummary, PodSummary

__all__ = ["NodeSummary", "PodSummary"]
