"""Selection set for the pod multi-select screen."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from nodemaint.models.core.pod_summary import PodSummary


class SelectionSet:
    """Pods the operator has toggled for deletion, keyed by ``namespace/name``.

    Iteration follows toggle order; a pod toggled off and on again moves to
    the end. Fetched pod records are never flagged directly: ``snapshot``
    returns copies whose ``selected`` flag mirrors membership.
    """

    def __init__(self, pods: Iterable[PodSummary] = ()) -> None:
        self._pods: dict[str, PodSummary] = {pod.key: pod for pod in pods}

    def __len__(self) -> int:
        return len(self._pods)

    def __contains__(self, key: object) -> bool:
        return key in self._pods

    def __iter__(self) -> Iterator[str]:
        return iter(self._pods)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return list(self._pods) == list(other._pods)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self._pods)!r})"

    def toggle(self, pod: PodSummary) -> bool:
        """Insert the pod if absent, remove it if present.

        Returns:
            True when the pod is selected after the call.
        """
        key = pod.key
        if key in self._pods:
            del self._pods[key]
            return False
        self._pods[key] = pod.model_copy(update={"selected": True})
        return True

    def snapshot(self, pods: Sequence[PodSummary]) -> list[PodSummary]:
        """Return ``pods`` in their order with ``selected`` reconciled."""
        reconciled: list[PodSummary] = []
        for pod in pods:
            selected = pod.key in self._pods
            if pod.selected != selected:
                pod = pod.model_copy(update={"selected": selected})
            reconciled.append(pod)
        return reconciled

    def prune(self, pods: Sequence[PodSummary]) -> None:
        """Drop keys whose pod is no longer in ``pods``."""
        listed = {pod.key for pod in pods}
        for key in [key for key in self._pods if key not in listed]:
            del self._pods[key]

    def clear(self) -> None:
        self._pods.clear()

    def copy(self) -> SelectionSet:
        return SelectionSet(self._pods.values())

    def pods(self) -> list[PodSummary]:
        """Selected pods in toggle order."""
        return list(self._pods.values())
