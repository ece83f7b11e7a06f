"""WorkerMixin - Worker lifecycle management for background cluster calls.

Screens inheriting this mixin start their background pipelines through
``start_worker`` and receive a single ``on_worker_failed`` callback when a
worker dies from an exception it did not handle itself.

Workers never touch screen state; they post messages back to the screen.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    This mixin should be inherited by screens that run cluster calls in the
    background. It provides:

    - `start_worker()`: Worker creation that never crashes the app on error
    - `cancel_workers()`: Cancel all running workers (uses `self.workers`)
    - `on_worker_state_changed()`: Logs transitions with their duration and
      forwards failures to `on_worker_failed()`

    Note:
        Cancelling a worker does not stop a kubectl subprocess that already
        started; its thread runs to completion and the result is dropped.
    """

    def __init__(self) -> None:
        # Call super().__init__() to ensure proper initialization of parent classes
        super().__init__()
        self._worker_start_times: dict[str, float] = {}

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = False,
        name: str | None = None,
    ) -> Worker[Any]:
        """Start a worker in the async event loop.

        Args:
            worker_func: Async function to run in worker
            exclusive: If True, cancel previous workers before starting new one
            name: Optional worker name for debugging

        Returns:
            The Worker instance
        """
        if exclusive:
            self.cancel_workers()

        if name:
            self._worker_start_times[name] = time.monotonic()

        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            exclusive=exclusive,
            thread=False,
            name=name,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's built-in WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion and report failures.

        Args:
            event: The worker state change event
        """
        worker = event.worker
        if event.state not in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            return

        duration_ms = 0.0
        started = self._worker_start_times.pop(worker.name, None)
        if started is not None:
            duration_ms = (time.monotonic() - started) * 1000

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{worker.name}' was cancelled ({duration_ms:.2f}ms)")
        elif event.state == WorkerState.ERROR:
            logger.error(
                f"Worker '{worker.name}' error: {worker.error} ({duration_ms:.2f}ms)",
                exc_info=worker.error,
            )
            self.on_worker_failed(worker)
        else:
            logger.debug(f"Worker '{worker.name}' completed successfully ({duration_ms:.2f}ms)")

    def on_worker_failed(self, worker: Worker[Any]) -> None:
        """Called when a worker ended with an unhandled exception.

        Override in screens that must surface the failure to the user.
        """


__all__ = ["WorkerMixin"]
