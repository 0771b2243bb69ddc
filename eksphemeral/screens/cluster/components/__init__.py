"""Cluster screen components."""

from eksphemeral.screens.cluster.components.cluster_card import ClusterCard

__all__ = ["ClusterCard"]
