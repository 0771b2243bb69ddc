"""Action dispatcher for user-initiated control plane requests.

Every action renders its outcome into the status banner and ends there;
failures never touch the registry or other in-flight requests.

Re-entrancy is enforced by an in-flight set keyed by (action kind, cluster
id): a second dispatch of the same kind for the same cluster is refused
while the first is running. Mutating actions (create, prolong) also drive
the shared busy flag the UI uses to disable its triggers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from eksphemeral.constants.defaults import PROLONG_MINUTES_DEFAULT
from eksphemeral.constants.enums import ActionKind
from eksphemeral.constants.values import (
    ACTION_IN_PROGRESS_MESSAGE,
    DETAIL_LOOKUP_FAILED_MESSAGE,
    PROVISIONING_MESSAGE,
)
from eksphemeral.controllers.control_plane.client import ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import ControlPlaneError
from eksphemeral.models.core.cluster_info import ClusterDetail, ClusterSpec

if TYPE_CHECKING:
    from eksphemeral.controllers.cluster.inventory_poller import InventoryPoller
    from eksphemeral.controllers.cluster.view import ClusterView

logger = logging.getLogger(__name__)

# Create has no cluster id yet; all creates share one key.
_CREATE_KEY = ""


class ActionInProgressError(Exception):
    """Raised when an action of the same kind is already running for a target."""

    def __init__(self, kind: ActionKind, key: str) -> None:
        target = key or "new cluster"
        super().__init__(
            ACTION_IN_PROGRESS_MESSAGE.format(action=kind.value.capitalize(), target=target)
        )
        self.kind = kind
        self.key = key


class InFlightGuard:
    """Set of active (kind, key) request keys."""

    def __init__(self) -> None:
        self._active: set[tuple[ActionKind, str]] = set()

    def is_active(self, kind: ActionKind, key: str = _CREATE_KEY) -> bool:
        return (kind, key) in self._active

    def has_mutating(self, excluding: tuple[ActionKind, str] | None = None) -> bool:
        """Whether any create/prolong request other than ``excluding`` is in flight."""
        return any(
            kind.is_mutating and (kind, key) != excluding
            for kind, key in self._active
        )

    def __len__(self) -> int:
        return len(self._active)

    @contextmanager
    def hold(self, kind: ActionKind, key: str = _CREATE_KEY) -> Iterator[None]:
        """Mark (kind, key) active for the duration of the block.

        Raises:
            ActionInProgressError: If (kind, key) is already active.
        """
        if (kind, key) in self._active:
            raise ActionInProgressError(kind, key)
        self._active.add((kind, key))
        try:
            yield
        finally:
            self._active.discard((kind, key))


class ActionDispatcher:
    """Dispatches create, prolong, details and config-command requests."""

    def __init__(
        self,
        client: ControlPlaneClient,
        view: ClusterView,
        inventory_poller: InventoryPoller,
        prolong_minutes: int = PROLONG_MINUTES_DEFAULT,
    ) -> None:
        self._client = client
        self._view = view
        self._inventory_poller = inventory_poller
        self.prolong_minutes = prolong_minutes
        self.guard = InFlightGuard()

    @property
    def busy(self) -> bool:
        """Whether a mutating action is in flight."""
        return self.guard.has_mutating()

    @contextmanager
    def _dispatch(self, kind: ActionKind, key: str) -> Iterator[None]:
        with self.guard.hold(kind, key):
            self._view.set_loading(True)
            if kind.is_mutating:
                self._view.set_busy(True)
            self._view.show_progress()
            try:
                yield
            finally:
                # Released by the guard only after this block; exclude self.
                self._view.set_loading(len(self.guard) > 1)
                if kind.is_mutating:
                    self._view.set_busy(self.guard.has_mutating(excluding=(kind, key)))

    # =========================================================================
    # Mutating actions
    # =========================================================================

    async def create(self, form: Mapping[str, Any] | ClusterSpec) -> str | None:
        """Request a new cluster.

        The registry is not touched on success; the new cluster shows up with
        the next inventory pass.

        Returns:
            The new cluster id, or None if the action failed or was refused.
        """
        try:
            spec = form if isinstance(form, ClusterSpec) else ClusterSpec.from_form(form)
        except ValidationError as e:
            logger.info(f"Rejected malformed cluster spec: {e}")
            self._view.show_status(f"Invalid cluster spec: {_first_error(e)}", is_error=True)
            return None

        try:
            with self._dispatch(ActionKind.CREATE, _CREATE_KEY):
                logger.info(f"Creating cluster {spec.name!r}")
                try:
                    cluster_id = await self._client.create_cluster(spec)
                except ControlPlaneError as e:
                    logger.warning(f"Create of {spec.name!r} failed: {e}")
                    self._view.show_status(str(e), is_error=True)
                    return None
                logger.info(f"Provisioning cluster {cluster_id}")
                self._view.show_status(PROVISIONING_MESSAGE.format(cluster_id=cluster_id))
                return cluster_id
        except ActionInProgressError as e:
            self._view.show_status(str(e), is_error=True)
            return None

    async def prolong(self, cluster_id: str) -> str | None:
        """Extend a cluster's lifetime by the configured amount.

        On success the cluster's panel is cleared, so the next Details click
        fetches fresh data, and one full inventory pass runs.

        Returns:
            The acknowledgement text, or None if the action failed or was refused.
        """
        try:
            with self._dispatch(ActionKind.PROLONG, cluster_id):
                logger.info(f"Prolonging {cluster_id} by {self.prolong_minutes} min")
                try:
                    ack = await self._client.prolong_cluster(cluster_id, self.prolong_minutes)
                except ControlPlaneError as e:
                    logger.warning(f"Prolong of {cluster_id} failed: {e}")
                    self._view.show_status(str(e), is_error=True)
                    return None
                self._view.show_status(ack)
                self._view.clear_detail_panel(cluster_id)
                # TODO: patch only the TTL of this entry instead of clearing the
                # panel and re-listing everything.
                await self._inventory_poller.poll(clear_status=False)
                return ack
        except ActionInProgressError as e:
            self._view.show_status(str(e), is_error=True)
            return None

    # =========================================================================
    # On-demand reads
    # =========================================================================

    async def fetch_details(self, cluster_id: str) -> ClusterDetail | None:
        """Load a cluster's detail into its panel."""
        try:
            with self._dispatch(ActionKind.DETAILS, cluster_id):
                try:
                    detail = await self._client.get_detail(cluster_id)
                except ControlPlaneError as e:
                    logger.warning(f"Details for {cluster_id} failed: {e}")
                    self._view.show_status(
                        DETAIL_LOOKUP_FAILED_MESSAGE.format(cluster_id=cluster_id),
                        is_error=True,
                    )
                    return None
                self._view.render_detail(cluster_id, detail)
                self._view.clear_status()
                return detail
        except ActionInProgressError as e:
            self._view.show_status(str(e), is_error=True)
            return None

    async def fetch_config_command(self, cluster_id: str) -> str | None:
        """Load a cluster's connection command into its panel."""
        try:
            with self._dispatch(ActionKind.CONFIG, cluster_id):
                try:
                    command = await self._client.get_config_command(cluster_id)
                except ControlPlaneError as e:
                    logger.warning(f"Config command for {cluster_id} failed: {e}")
                    self._view.show_status(str(e), is_error=True)
                    return None
                self._view.render_config_command(cluster_id, command)
                self._view.clear_status()
                return command
        except ActionInProgressError as e:
            self._view.show_status(str(e), is_error=True)
            return None


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "")


__all__ = [
    "ActionDispatcher",
    "ActionInProgressError",
    "InFlightGuard",
]
