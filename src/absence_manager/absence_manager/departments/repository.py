from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str] = None) -> Department:
        raise NotImplementedError

    def update(self, department_id: int, **changes: Any) -> Optional[Department]:
        raise NotImplementedError

    def delete_by_id(self, department_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError
