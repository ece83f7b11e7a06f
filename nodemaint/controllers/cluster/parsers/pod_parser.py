"""Pod parser for cluster controller - parses pod data into structured formats."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from nodemaint.models.core.pod_summary import PodSummary
from nodemaint.utils.duration import age_since


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def get_owner(owner_references: list[dict[str, Any]]) -> tuple[str, str]:
        """Return ``(name, kind)`` of the controlling owner.

        The reference flagged ``controller: true`` wins; otherwise the first
        reference is used. Unowned pods yield empty strings.
        """
        if not owner_references:
            return "", ""
        owner = next(
            (ref for ref in owner_references if ref.get("controller")),
            owner_references[0],
        )
        return str(owner.get("name", "")), str(owner.get("kind", ""))

    def parse_pod(self, pod: dict[str, Any], now: datetime | None = None) -> PodSummary:
        """Parse a single pod into PodSummary."""
        metadata = pod.get("metadata", {})
        owner_name, owner_kind = self.get_owner(metadata.get("ownerReferences") or [])
        return PodSummary(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            owner_name=owner_name,
            owner_kind=owner_kind,
            phase=pod.get("status", {}).get("phase", ""),
            age=age_since(metadata.get("creationTimestamp"), now),
        )

    def parse_pod_list(
        self, items: list[dict[str, Any]], now: datetime | None = None
    ) -> list[PodSummary]:
        """Parse a pod list, keeping API order."""
        return [self.parse_pod(item, now) for item in items]
