from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..core.enums import SessionType
from ..database.store import MemoryStore
from .model import Session
from .repository import SessionRepository


class MemorySessionRepository(SessionRepository):
    def __init__(self, store: MemoryStore):
        self._sessions = store.sessions

    def get_by_id(self, session_id: int) -> Optional[Session]:
        return self._sessions.get(session_id)

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
        return self._sessions.insert(
            date=date,
            type=type,
            module_element_id=module_element_id,
            teacher_id=teacher_id,
            group_id=group_id,
            notes=notes,
        )

    def update(self, session_id: int, **changes: Any) -> Optional[Session]:
        return self._sessions.update(session_id, **changes)

    def delete_by_id(self, session_id: int) -> bool:
        # Absences recorded for the session stay in place.
        return self._sessions.delete(session_id)

    def list_all(self) -> Sequence[Session]:
        return self._sessions.all()

    def list_by_teacher(self, teacher_id: int) -> Sequence[Session]:
        return self._sessions.filter(teacher_id=teacher_id)

    def list_by_module_element(self, module_element_id: int) -> Sequence[Session]:
        return self._sessions.filter(module_element_id=module_element_id)
