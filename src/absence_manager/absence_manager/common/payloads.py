"""Parsing of JSON request bodies into repository keyword arguments.

Each entity declares a tuple of ``FieldSpec``; ``parse_payload`` checks
presence, nullability and type of every declared field and collects all
problems into a single ``ValidationError``. Unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from ..core.exceptions import ValidationError
from .datetime_utils import as_naive_utc, parse_iso_datetime
from .serialization import camel_case


@dataclass(frozen=True)
class FieldSpec:
    name: str
    parser: Callable[[Any], Any]
    required: bool = True
    nullable: bool = False
    key: Optional[str] = None

    @property
    def json_key(self) -> str:
        return self.key or camel_case(self.name)


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("Expected string")
    return value


def as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Expected integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError("Expected integer")


def as_enum(enum_cls: Type[Enum]) -> Callable[[Any], Enum]:
    def parse(value: Any) -> Enum:
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(repr(m.value) for m in enum_cls)
            raise ValueError(f"Expected one of {allowed}") from None

    return parse


def as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return as_naive_utc(value)
    if not isinstance(value, str):
        raise ValueError("Expected ISO 8601 date string")
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValueError("Invalid date") from None


def parse_payload(data: Any, specs: Sequence[FieldSpec], *, partial: bool = False, label: str = "payload") -> Dict[str, Any]:
    """Return keyword arguments for ``create`` (or ``update`` when ``partial``).

    Optional fields absent from the body are left out so repository defaults apply.
    """

    if not isinstance(data, dict):
        raise ValidationError(f"Invalid {label} data", errors=[{"field": None, "message": "Expected a JSON object"}])

    values: Dict[str, Any] = {}
    errors: List[dict] = []
    for spec in specs:
        key = spec.json_key
        if key not in data:
            if spec.required and not partial:
                errors.append({"field": key, "message": "Required"})
            continue

        raw = data[key]
        if raw is None:
            if spec.nullable:
                values[spec.name] = None
            else:
                errors.append({"field": key, "message": "Must not be null"})
            continue

        try:
            values[spec.name] = spec.parser(raw)
        except ValueError as e:
            errors.append({"field": key, "message": str(e)})

    if errors:
        raise ValidationError(f"Invalid {label} data", errors=errors)
    return values


def parse_payload_list(data: Any, specs: Sequence[FieldSpec], *, label: str = "payload") -> List[Dict[str, Any]]:
    """Parse a JSON array of objects; every item must be valid before any is returned."""

    if not isinstance(data, list):
        raise ValidationError(f"Invalid {label} data", errors=[{"field": None, "message": "Expected a JSON array"}])

    parsed: List[Dict[str, Any]] = []
    errors: List[dict] = []
    for index, item in enumerate(data):
        try:
            parsed.append(parse_payload(item, specs, label=label))
        except ValidationError as e:
            errors.extend({"index": index, **err} for err in e.errors)

    if errors:
        raise ValidationError(f"Invalid {label} data", errors=errors)
    return parsed
