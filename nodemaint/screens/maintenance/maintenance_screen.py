"""Maintenance screen - the single interactive screen of the workflow.

Key presses become workflow input events; effect pipelines run in Textual
workers and come back as WorkflowResult messages. Both paths end in
``_feed``, so every transition happens in this screen's message handler.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Header, Input, LoadingIndicator, OptionList, Static
from textual.widgets.option_list import Option
from textual.worker import Worker

from nodemaint.constants.values import PIPELINE_WORKER_GROUP
from nodemaint.keyboard import MAINTENANCE_SCREEN_BINDINGS
from nodemaint.models.view.list_items import RenderItem
from nodemaint.screens.maintenance.presenter import MaintenancePresenter
from nodemaint.screens.mixins.worker_mixin import WorkerMixin
from nodemaint.workflow.effects import DESTRUCTIVE_EFFECTS, Effect
from nodemaint.workflow.events import (
    Back,
    Primary,
    Quit,
    ResultEvent,
    ToggleCordon,
    ToggleSelect,
    WorkCompleted,
    WorkFailed,
    WorkflowEvent,
)
from nodemaint.workflow.machine import Transition, start, transition
from nodemaint.workflow.runner import EffectRunner
from nodemaint.workflow.state import WorkflowState

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class WorkflowResult(Message):
    """Message carrying one result event from a background pipeline."""

    def __init__(self, event: ResultEvent) -> None:
        super().__init__()
        self.event = event


class MaintenanceScreen(WorkerMixin, Screen[WorkflowState]):
    """Node list, menus and confirmations rendered in one option list.

    The screen dismisses itself with the final WorkflowState once the
    session terminates.
    """

    BINDINGS = MAINTENANCE_SCREEN_BINDINGS

    DEFAULT_CSS = """
    MaintenanceScreen {
        layout: vertical;
    }

    #maintenance-body {
        height: 1fr;
        padding: 0 1;
    }

    #maintenance-title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }

    #maintenance-filter {
        display: none;
    }

    #maintenance-filter.visible {
        display: block;
    }

    #maintenance-list {
        height: 1fr;
    }

    #maintenance-loading {
        height: 1;
        display: none;
    }

    #maintenance-loading.visible {
        display: block;
    }

    #maintenance-status {
        height: auto;
    }

    #maintenance-status.error {
        color: $error;
    }

    #maintenance-help {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self, runner: EffectRunner) -> None:
        super().__init__()
        self._runner = runner
        self._presenter = MaintenancePresenter()
        self._state = WorkflowState()
        self._filter_query = ""
        self._items_by_id: dict[str, RenderItem] = {}
        self._visible_items: list[RenderItem] = []
        # worker name -> request id of the pipeline it runs
        self._worker_requests: dict[str, int] = {}

    @property
    def state(self) -> WorkflowState:
        """Current workflow state."""
        return self._state

    @property
    def visible_items(self) -> list[RenderItem]:
        """Rows currently shown, after filtering."""
        return list(self._visible_items)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static(id="maintenance-title", markup=False),
            Input(placeholder="Filter...", id="maintenance-filter"),
            OptionList(id="maintenance-list"),
            LoadingIndicator(id="maintenance-loading"),
            Static(id="maintenance-status", markup=False),
            Static(id="maintenance-help", markup=False),
            id="maintenance-body",
        )

    def on_mount(self) -> None:
        self._apply(start())
        self.query_one("#maintenance-list", OptionList).focus()

    # =========================================================================
    # Transition plumbing
    # =========================================================================

    def _feed(self, event: WorkflowEvent) -> None:
        self._apply(transition(self._state, event))

    def _apply(self, result: Transition) -> None:
        previous = self._state
        if previous.terminated:
            return
        self._state = result.state
        if result.effects:
            self._dispatch(result.state.request_id, result.effects)
        if self._state.terminated:
            logger.info(
                "Session ended (finished=%s, quitting=%s)",
                self._state.finished,
                self._state.quitting,
            )
            self.dismiss(self._state)
            return
        screen_changed = previous.screen != self._state.screen
        if screen_changed:
            self._close_filter()
        self._refresh_view(keep_highlight=not screen_changed)

    @staticmethod
    def _worker_name(request_id: int) -> str:
        return f"workflow-{request_id}"

    def _dispatch(self, request_id: int, effects: Sequence[Effect]) -> None:
        name = self._worker_name(request_id)
        self._worker_requests[name] = request_id
        logger.debug(
            "Dispatch %d: %s", request_id, ", ".join(type(e).__name__ for e in effects)
        )

        async def run_pipeline() -> None:
            await self._runner.run(request_id, effects, self._post_result)

        if any(isinstance(effect, DESTRUCTIVE_EFFECTS) for effect in effects):
            # Confirmed mutations run on the app: dismissing this screen on
            # quit must not cancel them. Their results are then dropped.
            self.app.run_worker(
                run_pipeline,
                name=name,
                group=PIPELINE_WORKER_GROUP,
                exit_on_error=False,
            )
        else:
            self.start_worker(run_pipeline, name=name)

    def _post_result(self, event: ResultEvent) -> None:
        self.post_message(WorkflowResult(event))

    def on_workflow_result(self, message: WorkflowResult) -> None:
        event = message.event
        if isinstance(event, (WorkCompleted, WorkFailed)):
            self._worker_requests.pop(self._worker_name(event.request_id), None)
        self._feed(event)

    def on_worker_failed(self, worker: Worker[Any]) -> None:
        request_id = self._worker_requests.pop(worker.name, None)
        if request_id is not None:
            self._feed(WorkFailed(request_id, str(worker.error)))

    # =========================================================================
    # Rendering
    # =========================================================================

    def _refresh_view(self, *, keep_highlight: bool) -> None:
        state = self._state
        presenter = self._presenter
        try:
            option_list = self.query_one("#maintenance-list", OptionList)
        except NoMatches:
            return

        self.query_one("#maintenance-title", Static).update(presenter.list_title(state))

        items = presenter.list_items(state)
        self._items_by_id = {item.item_id: item for item in items}
        self._visible_items = presenter.filter_items(items, self._filter_query)

        highlighted = option_list.highlighted if keep_highlight else None
        option_list.clear_options()
        option_list.add_options([self._build_option(item) for item in self._visible_items])
        if self._visible_items:
            index = 0 if highlighted is None else min(highlighted, len(self._visible_items) - 1)
            option_list.highlighted = index

        loading = self.query_one("#maintenance-loading", LoadingIndicator)
        loading.set_class(bool(state.loading), "visible")

        status = self.query_one("#maintenance-status", Static)
        status.update(presenter.status_text(state))
        status.set_class(bool(state.error), "error")

        self.query_one("#maintenance-help", Static).update(presenter.help_text(state))

    def _build_option(self, item: RenderItem) -> Option:
        title, description = self._presenter.render_item(item)
        prompt = Text.assemble((title, "bold"), "\n", (description, "dim"))
        return Option(prompt, id=item.item_id)

    def _highlighted_item(self) -> RenderItem | None:
        option_list = self.query_one("#maintenance-list", OptionList)
        index = option_list.highlighted
        if index is None or not 0 <= index < len(self._visible_items):
            return None
        return self._visible_items[index]

    # =========================================================================
    # Filter
    # =========================================================================

    def _filter_is_open(self) -> bool:
        return self.query_one("#maintenance-filter", Input).has_class("visible")

    def _close_filter(self) -> None:
        self._filter_query = ""
        try:
            filter_input = self.query_one("#maintenance-filter", Input)
        except NoMatches:
            return
        filter_input.value = ""
        filter_input.remove_class("visible")
        self.query_one("#maintenance-list", OptionList).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "maintenance-filter":
            return
        self._filter_query = event.value
        self._refresh_view(keep_highlight=False)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "maintenance-filter":
            self.query_one("#maintenance-list", OptionList).focus()

    # =========================================================================
    # Input events
    # =========================================================================

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        item = self._items_by_id.get(event.option_id or "")
        self._feed(Primary(item))

    def action_toggle_select(self) -> None:
        self._feed(ToggleSelect(self._highlighted_item()))

    def action_toggle_cordon(self) -> None:
        self._feed(ToggleCordon(self._highlighted_item()))

    def action_back(self) -> None:
        if self._filter_is_open():
            self._close_filter()
            self._refresh_view(keep_highlight=False)
            return
        self._feed(Back())

    def action_focus_filter(self) -> None:
        if self._state.terminated:
            return
        filter_input = self.query_one("#maintenance-filter", Input)
        filter_input.add_class("visible")
        filter_input.focus()

    def action_quit_session(self) -> None:
        self._feed(Quit())


__all__ = ["MaintenanceScreen", "WorkflowResult"]
