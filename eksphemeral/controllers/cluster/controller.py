"""Cluster controller for the sync and action-dispatch engine.

This module wires the control plane client, the cluster registry, both
pollers and the action dispatcher around a single display surface. The
registry is the only shared mutable state; it is written by the pollers
(and by the prolong handler, through its inventory pass) and only read by
the view.
"""

from __future__ import annotations

import logging
from eksphemeral.controllers.actions.dispatcher import ActionDispatcher
from eksphemeral.controllers.cluster.detail_poller import DetailPoller
from eksphemeral.controllers.cluster.inventory_poller import InventoryPoller
from eksphemeral.controllers.cluster.view import ClusterView
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.models.cache.cluster_registry import ClusterRegistry
from eksphemeral.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ClusterController:
    """Orchestrates inventory sync, label resolution and user actions.

    Scheduling is left to the caller: the TUI drives ``poll_inventory`` and
    ``poll_details`` from two independent timers, tests call them directly.
    """

    def __init__(
        self,
        view: ClusterView,
        settings: AppSettings | None = None,
        client: ControlPlaneClient | None = None,
        registry: ClusterRegistry | None = None,
    ) -> None:
        self.settings = settings if settings is not None else AppSettings()
        if client is None:
            client = ControlPlaneClient(
                self.settings.control_plane_url,
                timeout=self.settings.request_timeout_seconds,
            )
        self.client = client
        self.registry = registry if registry is not None else ClusterRegistry()
        self.inventory_poller = InventoryPoller(self.client, self.registry, view)
        self.detail_poller = DetailPoller(self.client, self.registry, view)
        self.dispatcher = ActionDispatcher(
            self.client,
            view,
            self.inventory_poller,
            prolong_minutes=self.settings.prolong_minutes,
        )

    async def poll_inventory(self) -> bool:
        """Run one full inventory pass (timer tick or manual refresh)."""
        return await self.inventory_poller.poll()

    async def poll_details(self) -> int:
        """Run one label-resolution tick."""
        return await self.detail_poller.poll()

    async def close(self) -> None:
        """Release the HTTP client. Outstanding requests are abandoned."""
        logger.debug("Closing control plane client")
        await self.client.close()


__all__ = ["ClusterController"]
