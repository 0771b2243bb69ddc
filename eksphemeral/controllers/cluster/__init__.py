"""Cluster synchronization: pollers, controller and view protocol."""

from eksphemeral.controllers.cluster.controller import ClusterController
from eksphemeral.controllers.cluster.detail_poller import DetailPoller
from eksphemeral.controllers.cluster.inventory_poller import InventoryPoller
from eksphemeral.controllers.cluster.view import ClusterView

__all__ = [
    "ClusterController",
    "ClusterView",
    "DetailPoller",
    "InventoryPoller",
]
