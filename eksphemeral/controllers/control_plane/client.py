"""Async HTTP client for the control plane.

Each operation is a single request/response; nothing is retried here.
Recovery is left to the next poll tick or an explicit user retry.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from eksphemeral.constants.timeouts import (
    CONTROL_PLANE_CONNECT_TIMEOUT,
    CONTROL_PLANE_REQUEST_TIMEOUT,
)
from eksphemeral.controllers.control_plane.exceptions import (
    ServiceError,
    TransportError,
)
from eksphemeral.models.core.cluster_info import (
    ClusterDetail,
    ClusterSpec,
    ProlongRequest,
)

logger = logging.getLogger(__name__)

ALL_CLUSTERS = "*"


class ControlPlaneClient:
    """Client for the control plane's inventory and lifecycle endpoints.

    Example:
        async with ControlPlaneClient("http://localhost:8080") as client:
            ids = await client.list_clusters()
    """

    STATUS_PATH = "/status"
    CONFIG_PATH = "/configof"
    CREATE_PATH = "/create"
    PROLONG_PATH = "/prolong"

    def __init__(
        self,
        base_url: str,
        timeout: float = CONTROL_PLANE_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Control plane base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport, used to stub the network in tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(
                self.timeout,
                connect=min(self.timeout, CONTROL_PLANE_CONNECT_TIMEOUT),
            ),
            transport=self._transport,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._client is None:
            self._client = self._build_client()
        return self._client

    async def __aenter__(self) -> ControlPlaneClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # =========================================================================
    # Operations
    # =========================================================================

    async def list_clusters(self) -> list[str]:
        """Return the ids of all active clusters."""
        response = await self._request(
            "GET", self.STATUS_PATH, params={"cluster": ALL_CLUSTERS}
        )
        payload = self._json(response)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ServiceError(
                "Unexpected inventory payload from control plane",
                status_code=response.status_code,
                endpoint=self.STATUS_PATH,
            )
        return [str(cluster_id) for cluster_id in payload]

    async def get_detail(self, cluster_id: str) -> ClusterDetail:
        """Return the detail of a single cluster."""
        response = await self._request(
            "GET", self.STATUS_PATH, params={"cluster": cluster_id}
        )
        payload = self._json(response)
        if not isinstance(payload, dict):
            raise ServiceError(
                f"Cluster {cluster_id} does not exist or control plane is down",
                status_code=response.status_code,
                endpoint=self.STATUS_PATH,
            )
        try:
            detail = ClusterDetail.model_validate(payload)
        except ValidationError as e:
            raise ServiceError(
                f"Invalid detail for cluster {cluster_id}: {e}",
                status_code=response.status_code,
                endpoint=self.STATUS_PATH,
            ) from e
        if not detail.name:
            raise ServiceError(
                f"Cluster {cluster_id} does not exist or control plane is down",
                status_code=response.status_code,
                endpoint=self.STATUS_PATH,
            )
        if not detail.id:
            detail = detail.model_copy(update={"id": cluster_id})
        return detail

    async def get_config_command(self, cluster_id: str) -> str:
        """Return the CLI command that configures kubectl for a cluster."""
        response = await self._request(
            "GET", self.CONFIG_PATH, params={"cluster": cluster_id}
        )
        return self._text(response)

    async def create_cluster(self, spec: ClusterSpec) -> str:
        """Request provisioning of a new cluster and return its id.

        Never retried: a repeated call may provision a duplicate.
        """
        response = await self._request(
            "POST", self.CREATE_PATH, json=spec.to_payload()
        )
        cluster_id = self._text(response)
        if not cluster_id:
            raise ServiceError(
                "Control plane returned no cluster id",
                status_code=response.status_code,
                endpoint=self.CREATE_PATH,
            )
        return cluster_id

    async def prolong_cluster(self, cluster_id: str, extra_minutes: int) -> str:
        """Extend a cluster's lifetime and return the acknowledgement text."""
        request = ProlongRequest(id=cluster_id, ptime=extra_minutes)
        response = await self._request(
            "POST", self.PROLONG_PATH, json=request.model_dump()
        )
        return self._text(response)

    # =========================================================================
    # Transport helpers
    # =========================================================================

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request and normalize failures.

        Raises:
            TransportError: If no response was received.
            ServiceError: If the response status is not 2xx.
        """
        logger.debug(f"{method} {self.base_url}{path} {kwargs.get('params') or ''}")
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"Control plane unreachable at {self.base_url}{path}: {e}")
            raise TransportError(
                f"Cannot reach control plane at {self.base_url}: {e}",
                endpoint=path,
                original_error=e,
            ) from e

        if not response.is_success:
            body = response.text.strip()
            raise ServiceError(
                body or f"Control plane request failed with status {response.status_code}",
                status_code=response.status_code,
                endpoint=path,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ServiceError(
                f"Malformed JSON from control plane: {e}",
                status_code=response.status_code,
                endpoint=response.request.url.path,
            ) from e

    @staticmethod
    def _text(response: httpx.Response) -> str:
        """Return an opaque text payload, unwrapping a JSON string if present."""
        text = response.text.strip()
        if text.startswith('"'):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError:
                return text
            if isinstance(decoded, str):
                return decoded.strip()
        return text


__all__ = [
    "ALL_CLUSTERS",
    "ControlPlaneClient",
]
