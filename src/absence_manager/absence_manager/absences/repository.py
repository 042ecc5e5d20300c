from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import AbsenceStatus
from .model import Absence


class AbsenceRepository(Protocol):
    def get_by_id(self, absence_id: int) -> Optional[Absence]:
        raise NotImplementedError

    def create(
        self,
        *,
        session_id: int,
        student_id: int,
        status: AbsenceStatus,
        notes: Optional[str] = None,
    ) -> Absence:
        raise NotImplementedError

    def batch_create(self, items: Iterable[Mapping[str, Any]]) -> Sequence[Absence]:
        """Create each item in order and return the created records positionally.

        Best-effort sequential insert: not atomic, earlier items stay created
        if a later one fails.
        """

        raise NotImplementedError

    def update(self, absence_id: int, **changes: Any) -> Optional[Absence]:
        raise NotImplementedError

    def delete_by_id(self, absence_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Absence]:
        raise NotImplementedError

    def list_by_session(self, session_id: int) -> Sequence[Absence]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[Absence]:
        raise NotImplementedError
