"""Keyboard bindings for the app and its screens."""

from textual.binding import Binding

# Active on every screen; quit wins over focused widgets.
APP_BINDINGS: list[Binding] = [
    Binding("q", "app.quit", "Quit", priority=True),
    Binding("question_mark", "show_help", "Keys", key_display="?"),
]

BASE_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
]

CLUSTER_SCREEN_BINDINGS: list[Binding] = [
    *BASE_SCREEN_BINDINGS,
    Binding("n", "create", "Create"),
]

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "CLUSTER_SCREEN_BINDINGS",
]
