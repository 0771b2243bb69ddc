"""User-initiated actions."""

from eksphemeral.controllers.actions.dispatcher import (
    ActionDispatcher,
    ActionInProgressError,
    InFlightGuard,
)

__all__ = [
    "ActionDispatcher",
    "ActionInProgressError",
    "InFlightGuard",
]
