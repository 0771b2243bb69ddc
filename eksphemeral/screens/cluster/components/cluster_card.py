"""Cluster card: one listed cluster with its actions and panel."""

from __future__ import annotations

from contextlib import suppress

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Button

from eksphemeral.constants.enums import ActionKind
from eksphemeral.screens.cluster.config import CARD_BUTTONS
from eksphemeral.screens.cluster.presenter import ClusterRow
from eksphemeral.widgets import CustomStatic


class ClusterCard(Vertical):
    """Label, action buttons and detail panel for a single cluster."""

    DEFAULT_CSS = """
    ClusterCard {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: round $panel;
    }

    ClusterCard .cluster-card-header {
        height: auto;
    }

    ClusterCard .cluster-label {
        width: 1fr;
        padding: 1 0;
    }

    ClusterCard .card-btn {
        min-width: 12;
        margin-left: 1;
    }

    ClusterCard .cluster-panel {
        height: auto;
        padding: 0 1 1 1;
    }
    """

    class ActionRequested(Message):
        """Posted when one of the card's action buttons is pressed."""

        def __init__(self, cluster_id: str, action: ActionKind) -> None:
            super().__init__()
            self.cluster_id = cluster_id
            self.action = action

    def __init__(self, row: ClusterRow, panel: Text | None = None) -> None:
        super().__init__(classes="cluster-card")
        self.cluster_id = row.cluster_id
        self._row = row
        self._panel = panel

    def compose(self) -> ComposeResult:
        with Horizontal(classes="cluster-card-header"):
            label = CustomStatic(self._row.as_text(), classes="cluster-label")
            label.tooltip = self._row.tooltip
            yield label
            for title, action in CARD_BUTTONS:
                yield Button(title, name=action, classes=f"card-btn {action}-btn")
        panel = CustomStatic(self._panel or "", classes="cluster-panel")
        panel.display = self._panel is not None
        yield panel

    @property
    def row(self) -> ClusterRow:
        return self._row

    @property
    def panel(self) -> Text | None:
        return self._panel

    def update_row(self, row: ClusterRow) -> None:
        self._row = row
        with suppress(NoMatches):
            label = self.query_one(".cluster-label", CustomStatic)
            label.update(row.as_text())
            label.tooltip = row.tooltip

    def update_panel(self, panel: Text | None) -> None:
        self._panel = panel
        with suppress(NoMatches):
            widget = self.query_one(".cluster-panel", CustomStatic)
            widget.update(panel or "")
            widget.display = panel is not None

    def set_mutating_enabled(self, enabled: bool) -> None:
        with suppress(NoMatches):
            self.query_one(".prolong-btn", Button).disabled = not enabled

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name:
            self.post_message(
                self.ActionRequested(self.cluster_id, ActionKind(event.button.name))
            )


__all__ = ["ClusterCard"]
