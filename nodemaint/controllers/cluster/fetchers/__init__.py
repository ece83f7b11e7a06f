"""Fetchers issuing kubectl queries for the cluster controller."""

from nodemaint.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from nodemaint.controllers.cluster.fetchers.pod_fetcher import PodFetcher

__all__ = ["NodeFetcher", "PodFetcher"]
