"""Cluster screen: inventory list, status banner and cluster actions.

The screen is the display surface of the sync engine. It schedules the two
pollers on independent timers, routes card buttons to the action
dispatcher and renders whatever the engine reports back.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from contextlib import suppress
from typing import Any

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, LoadingIndicator

from eksphemeral.constants.enums import ActionKind
from eksphemeral.constants.values import NO_CLUSTERS_MESSAGE, PROGRESS_MESSAGE
from eksphemeral.controllers.cluster.controller import ClusterController
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.keyboard import CLUSTER_SCREEN_BINDINGS
from eksphemeral.models.cache.cluster_registry import RegistryEntry
from eksphemeral.models.core.cluster_info import ClusterDetail
from eksphemeral.screens.base_screen import BaseScreen
from eksphemeral.screens.cluster.components import ClusterCard
from eksphemeral.screens.cluster.config import (
    CLUSTER_LIST_ID,
    CREATE_BUTTON_ID,
    EMPTY_STATE_ID,
    LOADING_INDICATOR_ID,
    REFRESH_BUTTON_ID,
    STATUS_BANNER_ID,
)
from eksphemeral.screens.cluster.presenter import ClusterPresenter
from eksphemeral.screens.mixins.worker_mixin import WorkerMixin
from eksphemeral.widgets import CreateClusterDialog, CustomStatic

logger = logging.getLogger(__name__)


class ClusterScreen(WorkerMixin, BaseScreen):
    """Lists active clusters and dispatches create/prolong/details/config."""

    BINDINGS = CLUSTER_SCREEN_BINDINGS

    DEFAULT_CSS = """
    ClusterScreen #status-banner {
        height: auto;
        min-height: 1;
        padding: 0 1;
        color: $text;
    }

    ClusterScreen #status-banner.error-text {
        color: $error;
    }

    ClusterScreen #loading-indicator {
        height: 1;
    }

    ClusterScreen #toolbar {
        height: auto;
        padding: 0 1;
    }

    ClusterScreen #cluster-list {
        height: 1fr;
        padding: 0 1;
    }
    """

    busy = reactive(False)

    def __init__(self, controller: ClusterController | None = None) -> None:
        super().__init__()
        self.controller = controller
        self.presenter = ClusterPresenter()
        self._cards: dict[str, ClusterCard] = {}
        self.status_message = ""
        self._inventory_timer: Timer | None = None
        self._detail_timer: Timer | None = None

    @property
    def screen_title(self) -> str:
        return "Clusters"

    def compose(self) -> ComposeResult:
        yield Header()
        yield CustomStatic("", id=STATUS_BANNER_ID)
        indicator = LoadingIndicator(id=LOADING_INDICATOR_ID)
        indicator.display = False
        yield indicator
        with Horizontal(id="toolbar"):
            yield Button("Refresh", id=REFRESH_BUTTON_ID)
            yield Button("Create", id=CREATE_BUTTON_ID, variant="primary")
        with VerticalScroll(id=CLUSTER_LIST_ID):
            yield CustomStatic(NO_CLUSTERS_MESSAGE, id=EMPTY_STATE_ID)
        yield Footer()

    def on_mount(self) -> None:
        settings = self.app.settings
        if self.controller is None:
            client: ControlPlaneClient | None = getattr(self.app, "client", None)
            self.controller = ClusterController(view=self, settings=settings, client=client)
        self.presenter = ClusterPresenter(console_link_template=settings.console_link_template)

        self._inventory_timer = self.set_interval(
            settings.inventory_refresh_seconds, self._schedule_inventory_poll
        )
        self._detail_timer = self.set_interval(
            settings.detail_refresh_seconds, self._schedule_detail_poll
        )

    async def load_data(self) -> None:
        """Run an inventory pass now (first load and manual refresh)."""
        self._schedule_inventory_poll()

    # =========================================================================
    # Scheduling
    # =========================================================================

    def _schedule_inventory_poll(self) -> None:
        if self.controller is not None:
            self.start_worker(self.controller.poll_inventory, name="inventory-poll", group="inventory")

    def _schedule_detail_poll(self) -> None:
        if self.controller is not None:
            self.start_worker(self.controller.poll_details, name="detail-poll", group="details")

    def _dispatch(self, work: Callable[[], Awaitable[Any]], name: str) -> None:
        self.start_worker(work, name=name, group="actions")

    # =========================================================================
    # Actions
    # =========================================================================

    def action_create(self) -> None:
        if self.controller is None:
            return
        if self.controller.dispatcher.busy:
            self.notify("Another request is in progress", severity="warning")
            return
        self.app.push_screen(
            CreateClusterDialog(self.app.settings.kube_versions),
            callback=self._on_create_submitted,
        )

    def _on_create_submitted(self, form: dict[str, str] | None) -> None:
        if form is None or self.controller is None:
            return
        dispatcher = self.controller.dispatcher

        async def _create() -> None:
            await dispatcher.create(form)

        self._dispatch(_create, "create")

    @on(Button.Pressed, f"#{REFRESH_BUTTON_ID}")
    async def _on_refresh_pressed(self) -> None:
        await self.action_refresh()

    @on(Button.Pressed, f"#{CREATE_BUTTON_ID}")
    def _on_create_pressed(self) -> None:
        self.action_create()

    def on_cluster_card_action_requested(self, message: ClusterCard.ActionRequested) -> None:
        if self.controller is None:
            return
        dispatcher = self.controller.dispatcher
        cluster_id = message.cluster_id
        handlers: dict[ActionKind, Callable[[str], Awaitable[Any]]] = {
            ActionKind.PROLONG: dispatcher.prolong,
            ActionKind.DETAILS: dispatcher.fetch_details,
            ActionKind.CONFIG: dispatcher.fetch_config_command,
        }
        handler = handlers.get(message.action)
        if handler is None:
            return

        async def _run() -> None:
            await handler(cluster_id)

        self._dispatch(_run, f"{message.action.value}-{cluster_id}")

    def action_show_help(self) -> None:
        self.notify(
            "r: refresh the cluster list  n: create a cluster  q: quit\n"
            "Prolong extends a cluster's lifetime by "
            f"{self.app.settings.prolong_minutes} minutes.",
            title="Help",
        )

    # =========================================================================
    # ClusterView implementation
    # =========================================================================

    def _banner(self) -> CustomStatic | None:
        with suppress(NoMatches):
            return self.query_one(f"#{STATUS_BANNER_ID}", CustomStatic)
        return None

    def show_progress(self) -> None:
        self.status_message = PROGRESS_MESSAGE
        banner = self._banner()
        if banner is not None:
            banner.remove_class("error-text")
            banner.update(PROGRESS_MESSAGE)

    def show_status(self, message: str, *, is_error: bool = False) -> None:
        self.status_message = message
        banner = self._banner()
        if banner is not None:
            banner.set_class(is_error, "error-text")
            banner.update(message)

    def clear_status(self) -> None:
        self.status_message = ""
        banner = self._banner()
        if banner is not None:
            banner.remove_class("error-text")
            banner.update("")

    def set_busy(self, busy: bool) -> None:
        self.busy = busy

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def watch_busy(self, busy: bool) -> None:
        with suppress(NoMatches):
            self.query_one(f"#{CREATE_BUTTON_ID}", Button).disabled = busy
        for card in self._cards.values():
            card.set_mutating_enabled(not busy)

    def render_inventory(self, entries: Sequence[RegistryEntry]) -> None:
        rows = self.presenter.build_rows(entries)
        ids = [row.cluster_id for row in rows]
        self.presenter.prune_panels(ids)

        with suppress(NoMatches):
            self.query_one(f"#{EMPTY_STATE_ID}", CustomStatic).display = not rows

        if ids == list(self._cards):
            for row in rows:
                self._cards[row.cluster_id].update_row(row)
            return

        try:
            container = self.query_one(f"#{CLUSTER_LIST_ID}", VerticalScroll)
        except NoMatches:
            return
        logger.debug(f"Rebuilding {len(rows)} cluster cards")
        for card in self._cards.values():
            card.remove()
        self._cards = {
            row.cluster_id: ClusterCard(row, self.presenter.panel(row.cluster_id))
            for row in rows
        }
        if self._cards:
            container.mount_all(self._cards.values())
            for card in self._cards.values():
                card.set_mutating_enabled(not self.busy)

    def render_entry(self, entry: RegistryEntry) -> None:
        card = self._cards.get(entry.id)
        if card is not None:
            card.update_row(self.presenter.build_row(entry))

    def render_detail(self, cluster_id: str, detail: ClusterDetail) -> None:
        panel = self.presenter.set_detail_panel(cluster_id, detail)
        card = self._cards.get(cluster_id)
        if card is not None:
            card.update_panel(panel)

    def render_config_command(self, cluster_id: str, command: str) -> None:
        panel = self.presenter.set_config_panel(cluster_id, command)
        card = self._cards.get(cluster_id)
        if card is not None:
            card.update_panel(panel)

    def clear_detail_panel(self, cluster_id: str) -> None:
        self.presenter.clear_panel(cluster_id)
        card = self._cards.get(cluster_id)
        if card is not None:
            card.update_panel(None)


__all__ = ["ClusterScreen"]
