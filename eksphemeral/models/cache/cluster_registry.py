"""Client-side cluster registry.

The registry mirrors the control plane's inventory: its key set is rebuilt
wholesale by the inventory poller and entries are refined in place by the
detail poller.

Concurrency notes:
- Read operations (snapshot, get, unresolved_ids) are lock-free. asyncio is
  single-threaded and these only read the dict.
- Write operations (replace_keys, patch_detail) acquire the lock and contain
  no suspension point once inside it, so a snapshot never observes a
  partially applied write.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from eksphemeral.models.core.cluster_info import ClusterDetail

logger = logging.getLogger(__name__)


@dataclass
class RegistryEntry:
    """Last-known state of one cluster."""

    id: str
    resolved: bool = False
    detail: ClusterDetail | None = None

    @property
    def label(self) -> str:
        """Display label: the cluster name once resolved, else the raw id."""
        if self.resolved and self.detail is not None and self.detail.name:
            return self.detail.name
        return self.id


class ClusterRegistry:
    """Ordered mapping of cluster id to registry entry."""

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, cluster_id: object) -> bool:
        return cluster_id in self._entries

    async def replace_keys(self, ids: Iterable[str]) -> None:
        """Synchronize the key set with a fresh inventory listing.

        New ids get unresolved entries, ids no longer listed are dropped and
        entries for ids still listed are carried over untouched. The
        resulting order is the order of ``ids``; duplicates keep their first
        position.
        """
        async with self._lock:
            entries: dict[str, RegistryEntry] = {}
            for cluster_id in ids:
                if cluster_id in entries:
                    continue
                existing = self._entries.get(cluster_id)
                entries[cluster_id] = existing or RegistryEntry(id=cluster_id)
            dropped = self._entries.keys() - entries.keys()
            self._entries = entries
        if dropped:
            logger.debug(f"Dropped {len(dropped)} clusters from registry")

    async def patch_detail(self, cluster_id: str, detail: ClusterDetail) -> bool:
        """Store a fetched detail for an existing entry.

        The entry becomes resolved once the detail carries a name. Resolution
        is never undone while the entry exists. A nameless detail never
        replaces the named detail of a resolved entry.

        Returns:
            True if the entry exists, False otherwise.
        """
        async with self._lock:
            entry = self._entries.get(cluster_id)
            if entry is None:
                return False
            if detail.name:
                entry.detail = detail
                entry.resolved = True
            elif not entry.resolved:
                entry.detail = detail
            return True

    def get(self, cluster_id: str) -> RegistryEntry | None:
        """Return a copy of the entry for ``cluster_id``, if present."""
        entry = self._entries.get(cluster_id)
        return replace(entry) if entry is not None else None

    def snapshot(self) -> list[RegistryEntry]:
        """Return copies of all entries in inventory order."""
        return [replace(entry) for entry in self._entries.values()]

    def unresolved_ids(self) -> list[str]:
        """Return ids of entries that have not received a named detail yet."""
        return [
            cluster_id
            for cluster_id, entry in self._entries.items()
            if not entry.resolved
        ]

    def ids(self) -> list[str]:
        """Return all ids in inventory order."""
        return list(self._entries)


__all__ = [
    "ClusterRegistry",
    "RegistryEntry",
]
