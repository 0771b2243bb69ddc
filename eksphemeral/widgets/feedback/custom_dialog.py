"""Custom dialog widgets for the TUI application.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-custom-dialog
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from eksphemeral.constants.defaults import (
    KUBE_VERSIONS_DEFAULT,
    NUM_WORKERS_DEFAULT,
    TIMEOUT_MINUTES_DEFAULT,
)

_DIALOG_MIN_WIDTH = 48
_DIALOG_SIDE_MARGIN = 6
_DIALOG_MIN_HEIGHT = 8
_DIALOG_VERTICAL_MARGIN = 4

# Form field id -> control plane key
CREATE_FORM_FIELDS: dict[str, str] = {
    "icname": "name",
    "icworkernum": "numworkers",
    "ictimeout": "timeout",
    "icowner": "owner",
}
KUBE_VERSION_SELECT_ID = "ickversion"


def _apply_dialog_shell_size(dialog: ModalScreen, content_width: int) -> None:
    available_width = max(
        _DIALOG_MIN_WIDTH,
        getattr(dialog.app.size, "width", _DIALOG_MIN_WIDTH + _DIALOG_SIDE_MARGIN)
        - _DIALOG_SIDE_MARGIN,
    )
    dialog_width = max(_DIALOG_MIN_WIDTH, min(content_width, available_width))
    dialog_max_height = max(
        _DIALOG_MIN_HEIGHT,
        getattr(dialog.app.size, "height", _DIALOG_MIN_HEIGHT + _DIALOG_VERTICAL_MARGIN)
        - _DIALOG_VERTICAL_MARGIN,
    )
    # Resize can arrive before the container is composed.
    with suppress(NoMatches):
        container = dialog.query_one(".dialog-container", Vertical)
        container.styles.width = str(dialog_width)
        container.styles.height = "auto"
        container.styles.max_height = str(dialog_max_height)


class CreateClusterDialog(ModalScreen[dict[str, str] | None]):
    """Form collecting a new cluster's parameters.

    Dismisses with the raw form values keyed by control plane field name,
    or None when cancelled. Values are not parsed here.
    """

    DEFAULT_CSS = """
    CreateClusterDialog {
        align: center middle;
    }

    CreateClusterDialog .dialog-container {
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }

    CreateClusterDialog .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }

    CreateClusterDialog .dialog-buttons {
        height: auto;
        margin-top: 1;
        align: right middle;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, kube_versions: Sequence[str] = KUBE_VERSIONS_DEFAULT) -> None:
        super().__init__(classes="widget-custom-dialog")
        self._kube_versions = list(kube_versions) or list(KUBE_VERSIONS_DEFAULT)

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static("Create a new cluster", classes="dialog-title")
            yield Label("Name")
            yield Input(placeholder="my-cluster", id="icname")
            yield Label("Number of worker nodes")
            yield Input(str(NUM_WORKERS_DEFAULT), id="icworkernum")
            yield Label("Kubernetes version")
            yield Select(
                [(version, version) for version in self._kube_versions],
                value=self._kube_versions[0],
                allow_blank=False,
                id=KUBE_VERSION_SELECT_ID,
            )
            yield Label("Timeout (minutes)")
            yield Input(str(TIMEOUT_MINUTES_DEFAULT), id="ictimeout")
            yield Label("Owner (email)")
            yield Input(placeholder="you@example.com", id="icowner")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Go!", id="submitcc", variant="primary")
                yield Button("Cancel", id="cancelcc")

    def on_mount(self) -> None:
        self._apply_dynamic_layout()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        _apply_dialog_shell_size(self, 64)

    def collect_form(self) -> dict[str, str]:
        """Return the current raw form values."""
        form = {
            key: self.query_one(f"#{field_id}", Input).value
            for field_id, key in CREATE_FORM_FIELDS.items()
        }
        version = self.query_one(f"#{KUBE_VERSION_SELECT_ID}", Select).value
        form["kubeversion"] = "" if version is Select.BLANK else str(version)
        return form

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        event.stop()
        if event.button.id == "submitcc":
            self.dismiss(self.collect_form())
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
