from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence

from ..core.enums import SessionType
from .model import Session


class SessionRepository(Protocol):
    def get_by_id(self, session_id: int) -> Optional[Session]:
        raise NotImplementedError

    def create(
        self,
        *,
        date: datetime,
        type: SessionType,
        module_element_id: int,
        teacher_id: int,
        group_id: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> Session:
        raise NotImplementedError

    def update(self, session_id: int, **changes: Any) -> Optional[Session]:
        raise NotImplementedError

    def delete_by_id(self, session_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Session]:
        raise NotImplementedError

    def list_by_teacher(self, teacher_id: int) -> Sequence[Session]:
        raise NotImplementedError

    def list_by_module_element(self, module_element_id: int) -> Sequence[Session]:
        raise NotImplementedError
