"""Core cluster models."""

from eksphemeral.models.core.cluster_info import (
    ClusterDetail,
    ClusterSpec,
    ClusterStatusBlock,
    ProlongRequest,
)

__all__ = [
    "ClusterDetail",
    "ClusterSpec",
    "ClusterStatusBlock",
    "ProlongRequest",
]
