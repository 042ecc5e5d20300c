from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.enums import AbsenceStatus
from ..database.store import MemoryStore
from .model import Absence
from .repository import AbsenceRepository


class MemoryAbsenceRepository(AbsenceRepository):
    def __init__(self, store: MemoryStore):
        self._absences = store.absences

    def get_by_id(self, absence_id: int) -> Optional[Absence]:
        return self._absences.get(absence_id)

    def create(
        self,
        *,
        session_id: int,
        student_id: int,
        status: AbsenceStatus,
        notes: Optional[str] = None,
    ) -> Absence:
        return self._absences.insert(session_id=session_id, student_id=student_id, status=status, notes=notes)

    def batch_create(self, items: Iterable[Mapping[str, Any]]) -> Sequence[Absence]:
        return [self.create(**dict(item)) for item in items]

    def update(self, absence_id: int, **changes: Any) -> Optional[Absence]:
        return self._absences.update(absence_id, **changes)

    def delete_by_id(self, absence_id: int) -> bool:
        return self._absences.delete(absence_id)

    def list_all(self) -> Sequence[Absence]:
        return self._absences.all()

    def list_by_session(self, session_id: int) -> Sequence[Absence]:
        return self._absences.filter(session_id=session_id)

    def list_by_student(self, student_id: int) -> Sequence[Absence]:
        return self._absences.filter(student_id=student_id)
