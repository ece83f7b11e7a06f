"""Interactive console for staged Kubernetes node maintenance."""

__version__ = "0.1.0"
