"""Control plane HTTP client."""

from eksphemeral.controllers.control_plane.client import ALL_CLUSTERS, ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import (
    ControlPlaneError,
    ServiceError,
    TransportError,
)

__all__ = [
    "ALL_CLUSTERS",
    "ControlPlaneClient",
    "ControlPlaneError",
    "ServiceError",
    "TransportError",
]
