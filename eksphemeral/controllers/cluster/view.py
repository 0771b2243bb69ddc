"""Display surface the sync engine renders into.

The pollers and the action dispatcher never touch widgets directly; they
talk to a ``ClusterView``. The Textual screen implements it, and tests use
a recording implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from eksphemeral.models.cache.cluster_registry import RegistryEntry
from eksphemeral.models.core.cluster_info import ClusterDetail


class ClusterView(Protocol):
    """Callbacks from the sync engine to the display."""

    def show_progress(self) -> None:
        """Replace the status banner with a progress affordance."""

    def show_status(self, message: str, *, is_error: bool = False) -> None:
        """Replace the status banner content with ``message``."""

    def clear_status(self) -> None:
        """Empty the status banner."""

    def set_busy(self, busy: bool) -> None:
        """Reflect whether a mutating action is in flight."""

    def set_loading(self, loading: bool) -> None:
        """Show or hide the loading indicator."""

    def render_inventory(self, entries: Sequence[RegistryEntry]) -> None:
        """Re-render the full cluster list from a registry snapshot."""

    def render_entry(self, entry: RegistryEntry) -> None:
        """Update the label and deep link of one listed cluster."""

    def render_detail(self, cluster_id: str, detail: ClusterDetail) -> None:
        """Show a cluster's detail in its panel, replacing prior content."""

    def render_config_command(self, cluster_id: str, command: str) -> None:
        """Show a cluster's config command in its panel, replacing prior content."""

    def clear_detail_panel(self, cluster_id: str) -> None:
        """Empty a cluster's panel."""


__all__ = ["ClusterView"]
