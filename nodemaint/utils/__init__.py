"""Utility functions for the node maintenance TUI."""

from nodemaint.utils.duration import age_since, format_age, parse_timestamp

__all__ = [
    "age_since",
    "format_age",
    "parse_timestamp",
]
