"""Node summary model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from nodemaint.constants.enums import NodeStatus


class NodeSummary(BaseModel):
    """Normalized view of one cluster node, rebuilt on every fetch."""

    model_config = ConfigDict(frozen=True)

    name: str
    ready: bool = False
    schedulable: bool = True
    roles: tuple[str, ...] = ()
    age: timedelta = timedelta(0)
    kubelet_version: str = ""
    internal_address: str = ""
    true_conditions: tuple[str, ...] = ()

    @property
    def status(self) -> str:
        return NodeStatus.READY.value if self.ready else NodeStatus.NOT_READY.value

    @property
    def is_cordoned(self) -> bool:
        return not self.schedulable
