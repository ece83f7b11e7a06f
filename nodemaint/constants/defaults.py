"""Default values for settings.

All default values used in the AppSettings model.
"""

from typing import Final

from nodemaint.constants.timeouts import CLUSTER_REQUEST_TIMEOUT_SECONDS

# ============================================================================
# Drain defaults
# ============================================================================

DRAIN_FORCE_DEFAULT: Final = True
DRAIN_IGNORE_DAEMONSETS_DEFAULT: Final = True
DRAIN_DELETE_EMPTYDIR_DATA_DEFAULT: Final = True
DRAIN_GRACE_PERIOD_SECONDS_DEFAULT: Final = -1  # use each pod's own grace period
DRAIN_TIMEOUT_SECONDS_DEFAULT: Final = 30

# ============================================================================
# Pod deletion defaults
# ============================================================================

POD_DELETE_GRACE_PERIOD_SECONDS_DEFAULT: Final = 0

# ============================================================================
# Request defaults
# ============================================================================

REQUEST_TIMEOUT_SECONDS_DEFAULT: Final = CLUSTER_REQUEST_TIMEOUT_SECONDS

# ============================================================================
# Settings file
# ============================================================================

CONFIG_ENV_VAR: Final = "NODE_MAINTAIN_CONFIG"
CONFIG_DIR_NAME: Final = "node-maintain"
CONFIG_FILE_NAME: Final = "settings.yaml"

__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "DRAIN_DELETE_EMPTYDIR_DATA_DEFAULT",
    "DRAIN_FORCE_DEFAULT",
    "DRAIN_GRACE_PERIOD_SECONDS_DEFAULT",
    "DRAIN_IGNORE_DAEMONSETS_DEFAULT",
    "DRAIN_TIMEOUT_SECONDS_DEFAULT",
    "POD_DELETE_GRACE_PERIOD_SECONDS_DEFAULT",
    "REQUEST_TIMEOUT_SECONDS_DEFAULT",
]
