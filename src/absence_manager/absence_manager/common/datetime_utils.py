from __future__ import annotations

from datetime import datetime, timezone


def as_naive_utc(value: datetime) -> datetime:
    """Aware datetimes are shifted to UTC and stripped; naive ones are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime string (a trailing ``Z`` is accepted).

    The result is always naive UTC so stored dates stay mutually comparable.
    """
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return as_naive_utc(datetime.fromisoformat(value))
