"""Detail poller: fine-grained label resolution for new clusters.

Only unresolved entries are fetched, so request volume per tick is bounded
by the number of newly listed clusters rather than the whole inventory.
Resolved entries are never re-fetched here; the user reloads them
explicitly through the Details action.

Ticks do not wait for each other. Two fetches for the same entry may be in
flight at once and are applied in arrival order, last one wins. The payload
is an idempotent read, so this never corrupts the registry.
"""

from __future__ import annotations

import asyncio
import logging

from eksphemeral.controllers.cluster.view import ClusterView
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import ControlPlaneError
from eksphemeral.models.cache.cluster_registry import ClusterRegistry

logger = logging.getLogger(__name__)


class DetailPoller:
    """Fetches details for unresolved registry entries."""

    def __init__(
        self,
        client: ControlPlaneClient,
        registry: ClusterRegistry,
        view: ClusterView,
    ) -> None:
        self._client = client
        self._registry = registry
        self._view = view

    async def poll(self) -> int:
        """Run one tick.

        Returns:
            Number of detail requests issued.
        """
        pending = self._registry.unresolved_ids()
        if not pending:
            return 0
        logger.debug(f"Resolving {len(pending)} cluster labels")
        await asyncio.gather(*(self._refresh(cluster_id) for cluster_id in pending))
        return len(pending)

    async def _refresh(self, cluster_id: str) -> None:
        try:
            detail = await self._client.get_detail(cluster_id)
        except ControlPlaneError as e:
            # Entry stays unresolved and is retried on the next tick.
            logger.warning(f"Detail lookup for {cluster_id} failed: {e}")
            self._view.show_status(str(e), is_error=True)
            return

        if not await self._registry.patch_detail(cluster_id, detail):
            logger.debug(f"Cluster {cluster_id} left the inventory before its detail arrived")
            return
        entry = self._registry.get(cluster_id)
        if entry is not None and entry.resolved:
            self._view.render_entry(entry)


__all__ = ["DetailPoller"]
