"""Age and timestamp helpers for Kubernetes objects.

Provides functions to turn API timestamps into ages and ages into the
compact ``Nd`` / ``Nh`` / ``Nm`` form used in list rows.
"""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timedelta, timezone
from typing import Any


def parse_timestamp(timestamp: Any) -> datetime | None:
    """Parse a Kubernetes RFC 3339 timestamp into an aware datetime.

    Args:
        timestamp: Value of e.g. ``metadata.creationTimestamp``.

    Returns:
        Aware datetime, or None when the value is missing or malformed.
    """
    if not isinstance(timestamp, str) or not timestamp:
        return None
    with suppress(ValueError, TypeError):
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def age_since(timestamp: Any, now: datetime | None = None) -> timedelta:
    """Return the age of an object created at ``timestamp``.

    Missing timestamps and timestamps in the future yield a zero age.
    """
    created = parse_timestamp(timestamp)
    if created is None:
        return timedelta(0)
    current = now or datetime.now(timezone.utc)
    return max(timedelta(0), current - created)


def format_age(age: timedelta) -> str:
    """Format an age compactly.

    The age is rounded to the nearest minute, then shown in days when it is
    at least a day, in hours when it is at least an hour, else in minutes:
    ``timedelta(hours=50) -> "2d"``, ``timedelta(minutes=90) -> "1h"``,
    ``timedelta(seconds=100) -> "2m"``.
    """
    total_seconds = max(0, int(age.total_seconds()))
    total_minutes = (total_seconds + 30) // 60
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        if hours >= 24:
            return f"{hours // 24}d"
        return f"{hours}h"
    return f"{minutes}m"


__all__ = ["age_since", "format_age", "parse_timestamp"]
