"""Controllers module for the EKSphemeral TUI.

This module provides the control plane client and the controllers that keep
the local cluster view in sync with it.
"""

from __future__ import annotations

# Actions
from eksphemeral.controllers.actions import (
    ActionDispatcher,
    ActionInProgressError,
    InFlightGuard,
)

# Cluster domain
from eksphemeral.controllers.cluster import (
    ClusterController,
    ClusterView,
    DetailPoller,
    InventoryPoller,
)

# Control plane
from eksphemeral.controllers.control_plane import (
    ControlPlaneClient,
    ControlPlaneError,
    ServiceError,
    TransportError,
)

__all__ = [
    "ActionDispatcher",
    "ActionInProgressError",
    "ClusterController",
    "ClusterView",
    "ControlPlaneClient",
    "ControlPlaneError",
    "DetailPoller",
    "InFlightGuard",
    "InventoryPoller",
    "ServiceError",
    "TransportError",
]
