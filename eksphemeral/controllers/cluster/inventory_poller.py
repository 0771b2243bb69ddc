"""Inventory poller: coarse-grained full-list refresh."""

from __future__ import annotations

import logging

from eksphemeral.controllers.cluster.view import ClusterView
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import ControlPlaneError
from eksphemeral.models.cache.cluster_registry import ClusterRegistry

logger = logging.getLogger(__name__)


class InventoryPoller:
    """Rebuilds the registry key set from the control plane's listing.

    A failed poll leaves the registry untouched and reports the failure in
    the status banner; the caller's schedule keeps running regardless.
    """

    def __init__(
        self,
        client: ControlPlaneClient,
        registry: ClusterRegistry,
        view: ClusterView,
    ) -> None:
        self._client = client
        self._registry = registry
        self._view = view
        self.poll_count = 0

    async def poll(self, *, clear_status: bool = True) -> bool:
        """Run one inventory pass.

        Args:
            clear_status: Whether a successful pass empties the status banner.

        Returns:
            True if the listing succeeded and the registry was replaced.
        """
        self.poll_count += 1
        try:
            ids = await self._client.list_clusters()
        except ControlPlaneError as e:
            logger.warning(f"Inventory poll #{self.poll_count} failed: {e}")
            self._view.show_status(str(e), is_error=True)
            return False

        await self._registry.replace_keys(ids)
        logger.debug(
            f"Inventory poll #{self.poll_count} listed {len(self._registry)} clusters"
        )

        self._view.render_inventory(self._registry.snapshot())
        if clear_status:
            self._view.clear_status()
        return True


__all__ = ["InventoryPoller"]
