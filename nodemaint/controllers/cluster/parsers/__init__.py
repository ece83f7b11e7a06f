"""Parsers turning raw kubectl JSON into inventory models."""

from nodemaint.controllers.cluster.parsers.node_parser import NodeParser
from nodemaint.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
