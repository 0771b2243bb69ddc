"""Client-side caches."""

from eksphemeral.models.cache.cluster_registry import ClusterRegistry, RegistryEntry

__all__ = ["ClusterRegistry", "RegistryEntry"]
