"""Cluster screen package."""

from eksphemeral.screens.cluster.cluster_screen import ClusterScreen

__all__ = ["ClusterScreen"]
