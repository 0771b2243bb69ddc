"""Main application class for the EKSphemeral TUI."""

from __future__ import annotations

from pathlib import Path

from textual.app import App
from textual.binding import Binding

from eksphemeral.constants import APP_TITLE
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.keyboard import APP_BINDINGS
from eksphemeral.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from eksphemeral.screens.cluster import ClusterScreen


class EphemeralClustersApp(App[None]):
    """Main TUI application for EKSphemeral."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings
    client: ControlPlaneClient

    def __init__(
        self,
        settings: AppSettings | None = None,
        settings_path: Path | None = None,
        control_plane_url: str | None = None,
        client: ControlPlaneClient | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings_path = settings_path
        self._settings_error: str | None = None

        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

        # Apply CLI override if provided
        if control_plane_url:
            self.settings = self.settings.model_copy(
                update={"control_plane_url": control_plane_url.rstrip("/")}
            )

        if client is None:
            client = ControlPlaneClient(
                self.settings.control_plane_url,
                timeout=self.settings.request_timeout_seconds,
            )
        self.client = client

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.settings_path)
        except ConfigLoadError as e:
            # Use defaults if loading fails
            self._settings_error = str(e)
            self.settings = AppSettings()

    def on_mount(self) -> None:
        if self._settings_error:
            self.notify(
                f"{self._settings_error}\nUsing default settings.",
                title="Settings",
                severity="warning",
            )
        self.push_screen(ClusterScreen())

    async def on_unmount(self) -> None:
        await self.client.close()

    def action_show_help(self) -> None:
        screen = self.screen
        if isinstance(screen, ClusterScreen):
            screen.action_show_help()
            return
        self.notify("q: quit", title="Help")


__all__ = ["EphemeralClustersApp"]
