"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from nodemaint.constants.defaults import (
    DRAIN_DELETE_EMPTYDIR_DATA_DEFAULT,
    DRAIN_FORCE_DEFAULT,
    DRAIN_GRACE_PERIOD_SECONDS_DEFAULT,
    DRAIN_IGNORE_DAEMONSETS_DEFAULT,
    DRAIN_TIMEOUT_SECONDS_DEFAULT,
    POD_DELETE_GRACE_PERIOD_SECONDS_DEFAULT,
    REQUEST_TIMEOUT_SECONDS_DEFAULT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Cluster access
    kubeconfig: str = ""
    context: str = ""
    request_timeout_seconds: int = Field(default=REQUEST_TIMEOUT_SECONDS_DEFAULT, ge=1)

    # Drain options (passed straight to kubectl drain)
    drain_force: bool = DRAIN_FORCE_DEFAULT
    drain_ignore_daemonsets: bool = DRAIN_IGNORE_DAEMONSETS_DEFAULT
    drain_delete_emptydir_data: bool = DRAIN_DELETE_EMPTYDIR_DATA_DEFAULT
    drain_grace_period_seconds: int = Field(default=DRAIN_GRACE_PERIOD_SECONDS_DEFAULT, ge=-1)
    drain_timeout_seconds: int = Field(default=DRAIN_TIMEOUT_SECONDS_DEFAULT, ge=1)

    # Pod deletion
    pod_delete_grace_period_seconds: int = Field(
        default=POD_DELETE_GRACE_PERIOD_SECONDS_DEFAULT, ge=0
    )
