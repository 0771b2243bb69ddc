"""Shared fixtures: an in-memory control plane and a recording view."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

import pytest

from eksphemeral.controllers.control_plane.exceptions import (
    ControlPlaneError,
    ServiceError,
)
from eksphemeral.models.cache.cluster_registry import ClusterRegistry, RegistryEntry
from eksphemeral.models.core.cluster_info import ClusterDetail, ClusterSpec


def make_detail(cluster_id: str, name: str = "", **overrides: Any) -> ClusterDetail:
    """Build a ClusterDetail from control plane style keys."""
    payload: dict[str, Any] = {
        "id": cluster_id,
        "name": name,
        "kubeversion": "1.14",
        "numworkers": 1,
        "created": "1549900800",
        "timeout": 45,
        "ttl": 30,
        "owner": "dev@example.com",
        "details": {"status": "ACTIVE", "endpoint": "https://eks.example"},
    }
    payload.update(overrides)
    return ClusterDetail.model_validate(payload)


class FakeControlPlaneClient:
    """In-memory stand-in for ControlPlaneClient that records every call.

    Attributes set by tests:
        ids: Returned by list_clusters.
        details: Returned by get_detail, keyed by id.
        errors: Raised instead, keyed by operation name or (operation, id).
    """

    def __init__(self) -> None:
        self.ids: list[str] = []
        self.details: dict[str, ClusterDetail] = {}
        self.config_commands: dict[str, str] = {}
        self.created_id = "c1-9f8"
        self.prolong_ack = "Extended cluster lifetime by 30 minutes"
        self.errors: dict[Any, ControlPlaneError] = {}
        self.calls: list[tuple[str, Any]] = []
        self.gate: asyncio.Event | None = None

    def _maybe_fail(self, operation: str, key: Any = None) -> None:
        error = self.errors.get((operation, key)) or self.errors.get(operation)
        if error is not None:
            raise error

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    def calls_to(self, operation: str) -> list[Any]:
        return [arg for name, arg in self.calls if name == operation]

    async def list_clusters(self) -> list[str]:
        self.calls.append(("list_clusters", None))
        self._maybe_fail("list_clusters")
        return list(self.ids)

    async def get_detail(self, cluster_id: str) -> ClusterDetail:
        self.calls.append(("get_detail", cluster_id))
        await self._wait()
        self._maybe_fail("get_detail", cluster_id)
        if cluster_id not in self.details:
            raise ServiceError(f"Cluster {cluster_id} does not exist", status_code=404)
        return self.details[cluster_id]

    async def get_config_command(self, cluster_id: str) -> str:
        self.calls.append(("get_config_command", cluster_id))
        self._maybe_fail("get_config_command", cluster_id)
        return self.config_commands.get(
            cluster_id, f"aws eks update-kubeconfig --name {cluster_id}"
        )

    async def create_cluster(self, spec: ClusterSpec) -> str:
        self.calls.append(("create_cluster", spec))
        await self._wait()
        self._maybe_fail("create_cluster")
        return self.created_id

    async def prolong_cluster(self, cluster_id: str, extra_minutes: int) -> str:
        self.calls.append(("prolong_cluster", (cluster_id, extra_minutes)))
        await self._wait()
        self._maybe_fail("prolong_cluster", cluster_id)
        return self.prolong_ack

    async def close(self) -> None:
        self.calls.append(("close", None))

    async def __aenter__(self) -> FakeControlPlaneClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


class RecordingView:
    """ClusterView that records every callback."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []
        self.banner: str = ""
        self.banner_is_error = False
        self.busy = False
        self.loading = False
        self.inventory: list[RegistryEntry] = []
        self.panels: dict[str, Any] = {}

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def show_progress(self) -> None:
        self.events.append(("show_progress", None))
        self.banner = "Please wait..."
        self.banner_is_error = False

    def show_status(self, message: str, *, is_error: bool = False) -> None:
        self.events.append(("show_status", (message, is_error)))
        self.banner = message
        self.banner_is_error = is_error

    def clear_status(self) -> None:
        self.events.append(("clear_status", None))
        self.banner = ""
        self.banner_is_error = False

    def set_busy(self, busy: bool) -> None:
        self.events.append(("set_busy", busy))
        self.busy = busy

    def set_loading(self, loading: bool) -> None:
        self.events.append(("set_loading", loading))
        self.loading = loading

    def render_inventory(self, entries: Sequence[RegistryEntry]) -> None:
        self.events.append(("render_inventory", [entry.id for entry in entries]))
        self.inventory = list(entries)

    def render_entry(self, entry: RegistryEntry) -> None:
        self.events.append(("render_entry", entry.id))

    def render_detail(self, cluster_id: str, detail: ClusterDetail) -> None:
        self.events.append(("render_detail", cluster_id))
        self.panels[cluster_id] = detail

    def render_config_command(self, cluster_id: str, command: str) -> None:
        self.events.append(("render_config_command", cluster_id))
        self.panels[cluster_id] = command

    def clear_detail_panel(self, cluster_id: str) -> None:
        self.events.append(("clear_detail_panel", cluster_id))
        self.panels.pop(cluster_id, None)


@pytest.fixture
def fake_client() -> FakeControlPlaneClient:
    return FakeControlPlaneClient()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def registry() -> ClusterRegistry:
    return ClusterRegistry()


@pytest.fixture
def detail_factory():
    """Factory fixture for ClusterDetail values."""
    return make_detail
