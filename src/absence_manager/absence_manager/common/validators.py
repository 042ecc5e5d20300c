from __future__ import annotations

from typing import Any, Iterable, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_unique(
    records: Iterable[Any],
    *,
    field: str,
    value: Any,
    label: str,
    exclude_id: Optional[int] = None,
) -> None:
    """Reject ``value`` when another record already holds it in ``field``.

    ``exclude_id`` lets an update keep its own current value.
    """

    for r in records:
        if r.id != exclude_id and getattr(r, field) == value:
            raise ValidationError(
                f"{label} already exists",
                errors=[{"field": field, "message": f"{label} already exists"}],
            )
