"""Screen mixins."""

from nodemaint.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
