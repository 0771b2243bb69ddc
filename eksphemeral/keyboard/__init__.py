"""Keyboard bindings (app-wide and per screen)."""

from eksphemeral.keyboard.navigation import (
    APP_BINDINGS,
    BASE_SCREEN_BINDINGS,
    CLUSTER_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "CLUSTER_SCREEN_BINDINGS",
]
