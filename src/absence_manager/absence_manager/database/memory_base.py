from __future__ import annotations

import threading
from dataclasses import fields, replace
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

T = TypeVar("T")


class MemoryTable(Generic[T]):
    """One in-memory collection of frozen dataclass records keyed by ``id``.

    Identifiers come from a per-table counter that starts at 1 and only ever
    grows, so ids are never reused after a delete. Mutations and snapshots
    take the table lock; callers never see a half-applied write.
    """

    def __init__(self, record_type: Type[T], name: Optional[str] = None):
        self._record_type = record_type
        self.name = name or record_type.__name__
        self._rows: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self._field_names = {f.name for f in fields(record_type)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def get(self, record_id: int) -> Optional[T]:
        with self._lock:
            return self._rows.get(record_id)

    def insert(self, **values: Any) -> T:
        values.pop("id", None)
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = self._record_type(id=record_id, **values)
            self._rows[record_id] = record
            return record

    def update(self, record_id: int, **changes: Any) -> Optional[T]:
        # Identifiers are immutable once assigned.
        changes.pop("id", None)
        unknown = set(changes) - self._field_names
        if unknown:
            raise TypeError(f"{self.name} has no field(s): {', '.join(sorted(unknown))}")

        with self._lock:
            existing = self._rows.get(record_id)
            if existing is None:
                return None
            updated = replace(existing, **changes)
            self._rows[record_id] = updated
            return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(record_id, None) is not None

    def all(self) -> List[T]:
        """Snapshot of every record in insertion order."""

        with self._lock:
            return list(self._rows.values())

    def filter(self, **criteria: Any) -> List[T]:
        return [r for r in self.all() if _matches(r, criteria)]

    def where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self.all() if predicate(r)]

    def find_first(self, **criteria: Any) -> Optional[T]:
        for r in self.all():
            if _matches(r, criteria):
                return r
        return None

    def delete_first(self, **criteria: Any) -> bool:
        """Remove the first record (insertion order) matching every criterion."""

        with self._lock:
            for record_id, r in self._rows.items():
                if _matches(r, criteria):
                    del self._rows[record_id]
                    return True
            return False


def _matches(record: Any, criteria: Dict[str, Any]) -> bool:
    return all(getattr(record, key) == value for key, value in criteria.items())
