from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import Department
from .repository import DepartmentRepository


class MemoryDepartmentRepository(DepartmentRepository):
    def __init__(self, store: MemoryStore):
        self._departments = store.departments

    def get_by_id(self, department_id: int) -> Optional[Department]:
        return self._departments.get(department_id)

    def create(self, *, name: str, description: Optional[str] = None) -> Department:
        return self._departments.insert(name=name, description=description)

    def update(self, department_id: int, **changes: Any) -> Optional[Department]:
        return self._departments.update(department_id, **changes)

    def delete_by_id(self, department_id: int) -> bool:
        # Courses of a deleted department are left in place (no cascade).
        return self._departments.delete(department_id)

    def list_all(self) -> Sequence[Department]:
        return self._departments.all()
