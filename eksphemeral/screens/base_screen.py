"""Base screen class for the EKSphemeral TUI.

Subclasses provide a title and a ``load_data`` coroutine; the base sets the
window title on mount, schedules the first load and maps the refresh
binding onto it.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, cast

from textual.screen import Screen

from eksphemeral.constants.values import APP_TITLE
from eksphemeral.keyboard import BASE_SCREEN_BINDINGS

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from eksphemeral.app import EphemeralClustersApp


class BaseScreen(Screen):
    """Abstract base class for TUI screens."""

    BINDINGS = BASE_SCREEN_BINDINGS

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE

    @property
    def app(self) -> EphemeralClustersApp:
        """Get the application instance."""
        return cast("EphemeralClustersApp", super().app)

    def set_title(self, title: str) -> None:
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    @abstractmethod
    async def load_data(self) -> None:
        """Load data for the screen."""
        ...

    async def action_refresh(self) -> None:
        logger.debug(f"Manual refresh on {type(self).__name__}")
        await self.load_data()
