"""Pod summary model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from nodemaint.constants.values import DAEMONSET_KIND


class PodSummary(BaseModel):
    """Normalized view of one pod scheduled on the inspected node.

    ``selected`` is only set through the selection set, which hands out
    copies; fetched records always start unselected.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    owner_name: str = ""
    owner_kind: str = ""
    phase: str = ""
    age: timedelta = timedelta(0)
    selected: bool = False

    @property
    def key(self) -> str:
        """Unique ``namespace/name`` key."""
        return f"{self.namespace}/{self.name}"

    @property
    def is_daemonset_owned(self) -> bool:
        return self.owner_kind == DAEMONSET_KIND
