"""Descriptions of background work requested by the state machine.

The transition function never calls the cluster. It returns these frozen
values; EffectRunner executes the ones returned by one transition, in
order, as a single pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FetchNodes:
    """List every node."""


@dataclass(frozen=True)
class FetchPods:
    """List the pods on one node."""

    node_name: str


@dataclass(frozen=True)
class ResolveNode:
    """Read the current record of one node."""

    node_name: str


@dataclass(frozen=True)
class SetSchedulable:
    """Cordon (``schedulable=False``) or uncordon a node."""

    node_name: str
    schedulable: bool


@dataclass(frozen=True)
class DrainNode:
    node_name: str


@dataclass(frozen=True)
class DeleteNonDaemonSetPods:
    node_name: str


@dataclass(frozen=True)
class DeletePods:
    """Delete pods sequentially, in ``targets`` order."""

    targets: tuple[tuple[str, str], ...]


Effect = Union[
    FetchNodes,
    FetchPods,
    ResolveNode,
    SetSchedulable,
    DrainNode,
    DeleteNonDaemonSetPods,
    DeletePods,
]

DESTRUCTIVE_EFFECTS = (DrainNode, DeleteNonDaemonSetPods, DeletePods)

__all__ = [
    "DESTRUCTIVE_EFFECTS",
    "DeleteNonDaemonSetPods",
    "DeletePods",
    "DrainNode",
    "Effect",
    "FetchNodes",
    "FetchPods",
    "ResolveNode",
    "SetSchedulable",
]
