"""WorkerMixin - Worker lifecycle management for async requests.

This module provides a mixin class that implements consistent patterns for:
- Background worker management using Textual Workers
- Loading indicator management
- Error reporting for workers that fail unexpectedly
- Loading duration tracking

Standard Reactive Pattern:
- The sync engine sets ``is_loading`` through the view protocol
- ``watch_is_loading`` shows/hides the loading indicator
- Unexpected worker errors set ``error``; ``watch_error`` surfaces it

WorkerMixin uses Textual's built-in `self.workers` (WorkerManager) for
worker lifecycle management.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.css.query import NoMatches, WrongType
from textual.reactive import reactive
from textual.widgets import LoadingIndicator
from textual.worker import Worker, WorkerState

from eksphemeral.widgets import CustomStatic

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    This mixin should be inherited by screens that issue async requests.
    It provides:

    - `start_worker()`: Worker creation; non-exclusive by default so periodic
      ticks never cancel each other
    - `cancel_workers()`: Cancel all running workers (uses `self.workers`)
    - `on_worker_state_changed()`: Logging, duration tracking, error surfacing
    - Loading helpers: `show_loading_overlay()`, `hide_loading_overlay()`
    - Error display via `show_error_state()`

    The default helpers expect a `#loading-indicator` and a `#status-banner`
    in the screen's compose().
    """

    is_loading = reactive(False)
    error = reactive[str | None](None)
    loading_duration_ms = reactive(0.0, init=False)

    def __init__(self) -> None:
        super().__init__()
        self._worker_started_at: dict[str, float] = {}

    def watch_is_loading(self, loading: bool) -> None:
        if loading:
            self.show_loading_overlay()
        else:
            self.hide_loading_overlay()

    def watch_error(self, error: str | None) -> None:
        if error:
            self.show_error_state(error)

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = False,
        name: str | None = None,
        group: str = "default",
    ) -> Worker[Any]:
        """Start an async worker.

        Args:
            worker_func: Async callable to run in the worker.
            exclusive: If True, cancel running workers of the same group first.
            name: Worker name for logging.
            group: Worker group.

        Returns:
            The Worker instance.
        """
        worker_name = name or getattr(worker_func, "__name__", "worker")
        self._worker_started_at[worker_name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=worker_name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers. Outstanding requests are abandoned."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion and surface unexpected failures."""
        if event.state not in (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR):
            return

        duration_ms = 0.0
        started_at = self._worker_started_at.pop(event.worker.name, None)
        if started_at is not None:
            duration_ms = (time.monotonic() - started_at) * 1000
            self.loading_duration_ms = duration_ms

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{event.worker.name}' was cancelled ({duration_ms:.2f}ms)")
        elif event.state == WorkerState.ERROR:
            logger.error(
                f"Worker '{event.worker.name}' error: {event.worker.error} ({duration_ms:.2f}ms)"
            )
            self.error = str(event.worker.error)
        else:
            logger.debug(f"Worker '{event.worker.name}' completed ({duration_ms:.2f}ms)")

    # =========================================================================
    # Loading State Management - Default implementations
    # =========================================================================

    def show_loading_overlay(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(  # type: ignore[attr-defined]
                "#loading-indicator", LoadingIndicator
            ).display = True

    def hide_loading_overlay(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(  # type: ignore[attr-defined]
                "#loading-indicator", LoadingIndicator
            ).display = False

    def show_error_state(self, message: str) -> None:
        """Show an error message in the status banner."""
        with suppress(NoMatches, WrongType):
            banner = self.query_one(  # type: ignore[attr-defined]
                "#status-banner", CustomStatic
            )
            banner.update(message)
            banner.add_class("error-text")


__all__ = ["WorkerMixin"]
