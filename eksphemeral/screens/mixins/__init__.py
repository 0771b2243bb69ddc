"""Screen mixins package."""

from eksphemeral.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
