"""Main application class for the node maintenance TUI."""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import Any

from textual.app import App
from textual.binding import Binding
from textual.worker import Worker, WorkerError, WorkerState

from nodemaint.constants import APP_TITLE
from nodemaint.constants.values import PIPELINE_WORKER_GROUP, STATUS_WAITING_FOR_PIPELINES
from nodemaint.controllers.base import BaseController
from nodemaint.controllers.maintenance import MaintenanceExecutor
from nodemaint.keyboard.app import APP_BINDINGS
from nodemaint.models.state.app_settings import AppSettings
from nodemaint.screens.maintenance import MaintenanceScreen
from nodemaint.workflow.runner import EffectRunner
from nodemaint.workflow.state import WorkflowState

logger = logging.getLogger(__name__)


class NodeMaintainApp(App[list[str]]):
    """Interactive maintenance session for one node at a time.

    The app exits with the operator-facing result lines of the session as its
    return value, and with return code 1 when the session ended in error.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    DEFAULT_CSS = """
    Screen {
        background: $background;
    }
    """

    settings: AppSettings

    def __init__(
        self,
        inventory: BaseController,
        executor: MaintenanceExecutor,
        settings: AppSettings | None = None,
        context: str | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.context = context
        self.session_error = ""
        self._runner = EffectRunner(inventory, executor)

    def on_mount(self) -> None:
        if self.context:
            self.sub_title = self.context
        self.push_screen(MaintenanceScreen(self._runner), callback=self._on_session_end)

    def _on_session_end(self, state: WorkflowState | None) -> None:
        output: list[str] = []
        return_code = 0
        if state is not None:
            self.session_error = state.error
            if state.error:
                logger.error("Session ended with error: %s", state.error)
            output = list(state.output)
            return_code = 1 if state.error else 0

        if not self.pending_pipelines():
            self.exit(output, return_code=return_code)
            return
        self.notify(STATUS_WAITING_FOR_PIPELINES, timeout=60)
        self.run_worker(
            self._exit_after_pipelines(output, return_code),
            name="session-exit",
            exit_on_error=False,
        )

    # =========================================================================
    # Confirmed pipelines
    # =========================================================================

    def pending_pipelines(self) -> list[Worker[Any]]:
        """Confirmed mutation pipelines that have not finished yet."""
        return [
            worker
            for worker in self.workers
            if worker.group == PIPELINE_WORKER_GROUP and not worker.is_finished
        ]

    async def _exit_after_pipelines(self, output: list[str], return_code: int) -> None:
        pending = self.pending_pipelines()
        logger.info("Waiting for %d confirmed pipeline(s) before exit", len(pending))
        for worker in pending:
            # failures are logged by on_worker_state_changed
            with suppress(WorkerError):
                await worker.wait()
        self.exit(output, return_code=return_code)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        worker = event.worker
        if worker.group != PIPELINE_WORKER_GROUP:
            return
        if event.state == WorkerState.ERROR:
            logger.error(
                f"Pipeline '{worker.name}' error: {worker.error}",
                exc_info=worker.error,
            )
            screen = self.screen
            if isinstance(screen, MaintenanceScreen):
                screen.on_worker_failed(worker)
        elif event.state == WorkerState.SUCCESS:
            logger.debug(f"Pipeline '{worker.name}' completed successfully")

    def action_quit_session(self) -> None:
        """Quit from any state, even while work is in flight."""
        screen = self.screen
        if isinstance(screen, MaintenanceScreen):
            screen.action_quit_session()
        elif self.pending_pipelines():
            self.notify(STATUS_WAITING_FOR_PIPELINES)
        else:
            self.exit([])


__all__ = ["NodeMaintainApp"]
