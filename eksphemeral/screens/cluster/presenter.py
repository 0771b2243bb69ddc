"""Cluster screen presenter - projects registry state into display form.

The presenter is derived state only: rows are rebuilt from registry
snapshots and never read back. The one thing it keeps is the content of
each cluster's panel, which the user fills on demand.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import tzinfo
from urllib.parse import quote

from rich.style import Style
from rich.text import Text

from eksphemeral.constants.values import (
    AWS_CLI_MIN_VERSION,
    CONSOLE_LINK_TEMPLATE,
    CONSOLE_LINK_TOOLTIP,
    KUBECONFIG_ALTERNATIVES_URL,
)
from eksphemeral.models.cache.cluster_registry import RegistryEntry
from eksphemeral.models.core.cluster_info import ClusterDetail
from eksphemeral.screens.cluster.config import (
    DETAIL_FIELD_LABELS,
    STATUS_FIELD_LABELS,
)
from eksphemeral.utils.time_format import format_timestamp

_TITLE_STYLE = Style(bold=True)
_CODE_STYLE = Style(italic=True)


@dataclass(frozen=True)
class ClusterRow:
    """Display form of one registry entry."""

    cluster_id: str
    label: str
    link: str | None = None
    tooltip: str | None = None
    resolved: bool = False

    def as_text(self) -> Text:
        """Render the label, linked to the console when resolved."""
        if self.link:
            return Text(self.label, style=Style(link=self.link, underline=True))
        return Text(self.label)


class ClusterPresenter:
    """Presenter for ClusterScreen - formatting and per-cluster panel content."""

    def __init__(
        self,
        console_link_template: str = CONSOLE_LINK_TEMPLATE,
        tz: tzinfo | None = None,
    ) -> None:
        self._console_link_template = console_link_template
        self._tz = tz
        self._panels: dict[str, Text] = {}

    # =========================================================================
    # Rows
    # =========================================================================

    def console_link(self, name: str) -> str:
        """Deep link into the provider console for a cluster name."""
        return self._console_link_template.format(name=quote(name, safe=""))

    def build_row(self, entry: RegistryEntry) -> ClusterRow:
        if not entry.resolved or entry.detail is None:
            return ClusterRow(cluster_id=entry.id, label=entry.id)
        return ClusterRow(
            cluster_id=entry.id,
            label=entry.label,
            link=self.console_link(entry.detail.name),
            tooltip=CONSOLE_LINK_TOOLTIP,
            resolved=True,
        )

    def build_rows(self, entries: Iterable[RegistryEntry]) -> list[ClusterRow]:
        return [self.build_row(entry) for entry in entries]

    # =========================================================================
    # Panels
    # =========================================================================

    def detail_lines(self, detail: ClusterDetail) -> list[tuple[str, str]]:
        """Return (label, value) pairs for the detail panel, in display order."""
        values = {
            "name": detail.name,
            "kube_version": detail.kube_version,
            "num_workers": str(detail.num_workers),
            "created_at": format_timestamp(detail.created_at, self._tz),
            "timeout_minutes": str(detail.timeout_minutes),
            "ttl_minutes_remaining": f"{detail.ttl_minutes_remaining} min left",
            "owner": (
                f"{detail.owner} notified on creation and 5 min before destruction"
            ),
        }
        return [(DETAIL_FIELD_LABELS[key], values[key]) for key in DETAIL_FIELD_LABELS]

    def status_lines(self, detail: ClusterDetail) -> list[tuple[str, str]]:
        """Return (label, value) pairs for the provider status block."""
        block = detail.status
        return [
            (label, str(getattr(block, field)))
            for field, label in STATUS_FIELD_LABELS.items()
        ]

    def format_detail(self, detail: ClusterDetail) -> Text:
        text = Text()
        for label, value in self.detail_lines(detail):
            text.append(f"{label}: ", style=_TITLE_STYLE)
            text.append(f"{value}\n")
        text.append("Cluster summary:\n", style=_TITLE_STYLE)
        for label, value in self.status_lines(detail):
            text.append(f"  {label}: ", style=_TITLE_STYLE)
            text.append(f"{value}\n")
        text.rstrip()
        return text

    def format_config_command(self, command: str) -> Text:
        text = Text()
        text.append("1. ", style=_TITLE_STYLE)
        text.append("In the environment you want to use the cluster, make sure you have the AWS CLI at least in version ")
        text.append(AWS_CLI_MIN_VERSION, style=_CODE_STYLE)
        text.append(" installed. Should you have an older version consider upgrading it or check out ")
        text.append("alternatives", style=Style(link=KUBECONFIG_ALTERNATIVES_URL, underline=True))
        text.append(" to create the kubeconfig.\n")
        text.append("2. ", style=_TITLE_STYLE)
        text.append("Use the following command to configure kubectl to point to your cluster:\n")
        text.append(command, style=_CODE_STYLE)
        return text

    def set_detail_panel(self, cluster_id: str, detail: ClusterDetail) -> Text:
        panel = self.format_detail(detail)
        self._panels[cluster_id] = panel
        return panel

    def set_config_panel(self, cluster_id: str, command: str) -> Text:
        panel = self.format_config_command(command)
        self._panels[cluster_id] = panel
        return panel

    def clear_panel(self, cluster_id: str) -> None:
        self._panels.pop(cluster_id, None)

    def panel(self, cluster_id: str) -> Text | None:
        return self._panels.get(cluster_id)

    def prune_panels(self, cluster_ids: Sequence[str]) -> None:
        """Drop panels of clusters that are no longer listed."""
        keep = set(cluster_ids)
        for cluster_id in [key for key in self._panels if key not in keep]:
            del self._panels[cluster_id]


__all__ = [
    "ClusterPresenter",
    "ClusterRow",
]
