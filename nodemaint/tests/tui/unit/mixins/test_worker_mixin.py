"""Tests for WorkerMixin."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

from textual.worker import WorkerState

from nodemaint.screens.mixins.worker_mixin import WorkerMixin


class _Host(WorkerMixin):
    """Minimal host standing in for a Screen."""

    def __init__(self) -> None:
        super().__init__()
        self.run_worker = MagicMock(return_value="worker")
        self.workers = MagicMock()
        self.failed: list[Any] = []

    def on_worker_failed(self, worker: Any) -> None:
        self.failed.append(worker)


def _state_changed(name: str, state: WorkerState, error: Exception | None = None) -> SimpleNamespace:
    return SimpleNamespace(worker=SimpleNamespace(name=name, error=error), state=state)


class TestWorkerMixin:
    """Tests for WorkerMixin."""

    def test_start_worker_runs_async_without_exit_on_error(self) -> None:
        host = _Host()

        async def job() -> None:
            return None

        assert host.start_worker(job, name="workflow-1") == "worker"
        host.run_worker.assert_called_once_with(
            job, exclusive=False, thread=False, name="workflow-1", exit_on_error=False
        )
        host.workers.cancel_all.assert_not_called()

    def test_exclusive_worker_cancels_previous(self) -> None:
        host = _Host()

        async def job() -> None:
            return None

        host.start_worker(job, exclusive=True, name="w")
        host.workers.cancel_all.assert_called_once()

    def test_error_state_reports_failure(self) -> None:
        host = _Host()
        event = _state_changed("workflow-2", WorkerState.ERROR, RuntimeError("boom"))

        host.on_worker_state_changed(event)  # type: ignore[arg-type]

        assert host.failed == [event.worker]

    def test_success_and_running_do_not_report(self) -> None:
        host = _Host()
        host.on_worker_state_changed(_state_changed("w", WorkerState.RUNNING))  # type: ignore[arg-type]
        host.on_worker_state_changed(_state_changed("w", WorkerState.SUCCESS))  # type: ignore[arg-type]
        host.on_worker_state_changed(_state_changed("w", WorkerState.CANCELLED))  # type: ignore[arg-type]
        assert host.failed == []
