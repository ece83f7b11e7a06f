"""Tests for node and pod fetchers."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from nodemaint.controllers.cluster.errors import ClusterCommandError
from nodemaint.controllers.cluster.fetchers import NodeFetcher, PodFetcher


class TestNodeFetcher:
    """Tests for NodeFetcher class."""

    @pytest.fixture
    def mock_run_kubectl(self) -> AsyncMock:
        """Create mock run_kubectl function."""
        return AsyncMock()

    def test_fetcher_init(self, mock_run_kubectl: AsyncMock) -> None:
        """Test NodeFetcher initialization with run_kubectl_func."""
        fetcher = NodeFetcher(run_kubectl_func=mock_run_kubectl)
        assert fetcher._run_kubectl is mock_run_kubectl

    @pytest.mark.asyncio
    async def test_fetch_nodes_raw_uses_request_timeout(self, mock_run_kubectl: AsyncMock) -> None:
        """Node list is fetched as JSON with a bounded request timeout."""
        mock_run_kubectl.return_value = json.dumps({"items": [{"metadata": {"name": "n1"}}]})
        fetcher = NodeFetcher(mock_run_kubectl, request_timeout_seconds=12)

        items = await fetcher.fetch_nodes_raw()

        assert items == [{"metadata": {"name": "n1"}}]
        called_args = mock_run_kubectl.await_args.args[0]
        assert called_args[:2] == ("get", "nodes")
        assert "--request-timeout=12s" in called_args

    @pytest.mark.asyncio
    async def test_fetch_nodes_raw_empty_list(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.return_value = '{"items": []}'
        assert await NodeFetcher(mock_run_kubectl).fetch_nodes_raw() == []

    @pytest.mark.asyncio
    async def test_fetch_node_raw_targets_one_node(self, mock_run_kubectl: AsyncMock) -> None:
        """Single node lookup passes the node name."""
        mock_run_kubectl.return_value = '{"metadata": {"name": "worker-1"}}'
        fetcher = NodeFetcher(mock_run_kubectl)

        item = await fetcher.fetch_node_raw("worker-1")

        assert item["metadata"]["name"] == "worker-1"
        assert mock_run_kubectl.await_args.args[0][:3] == ("get", "node", "worker-1")

    @pytest.mark.asyncio
    async def test_invalid_json_raises_cluster_error(self, mock_run_kubectl: AsyncMock) -> None:
        """Undecodable output surfaces as ClusterCommandError."""
        mock_run_kubectl.return_value = "not json"
        with pytest.raises(ClusterCommandError, match="unexpected kubectl output"):
            await NodeFetcher(mock_run_kubectl).fetch_nodes_raw()

    @pytest.mark.asyncio
    async def test_kubectl_errors_propagate(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.side_effect = ClusterCommandError("connection refused")
        with pytest.raises(ClusterCommandError, match="connection refused"):
            await NodeFetcher(mock_run_kubectl).fetch_nodes_raw()


class TestPodFetcher:
    """Tests for PodFetcher class."""

    @pytest.mark.asyncio
    async def test_fetch_node_pods_raw_uses_field_selector(self) -> None:
        """Pods are filtered server-side by node across all namespaces."""
        run_kubectl = AsyncMock(return_value='{"items": [{"metadata": {"name": "p"}}]}')
        fetcher = PodFetcher(run_kubectl, request_timeout_seconds=30)

        items = await fetcher.fetch_node_pods_raw("worker-1")

        assert len(items) == 1
        called_args = run_kubectl.await_args.args[0]
        assert "--all-namespaces" in called_args
        assert "--field-selector=spec.nodeName=worker-1" in called_args
        assert "--request-timeout=30s" in called_args
