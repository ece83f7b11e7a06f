"""Core cluster inventory models."""

from nodemaint.models.core.node_summary import NodeSummary
from nodemaint.models.core.pod_summary import PodSummary

__all__ = ["NodeSummary", "PodSummary"]
