"""Timeout constants for the TUI.

All timeout values for kubectl requests and the subprocesses that carry them.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts
# ============================================================================

CLUSTER_REQUEST_TIMEOUT_SECONDS: Final = 30

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
KUBECTL_PROCESS_GRACE_SECONDS: Final = 15

# Setup probes run before the UI starts
KUBECTL_SETUP_TIMEOUT: Final = 10

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT_SECONDS",
    "KUBECTL_COMMAND_TIMEOUT",
    "KUBECTL_PROCESS_GRACE_SECONDS",
    "KUBECTL_SETUP_TIMEOUT",
]
