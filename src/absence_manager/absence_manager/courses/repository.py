from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_ABSENCE_THRESHOLD
from .model import Course


class CourseRepository(Protocol):
    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        code: str,
        department_id: int,
        description: Optional[str] = None,
        absence_threshold: Optional[int] = DEFAULT_ABSENCE_THRESHOLD,
    ) -> Course:
        raise NotImplementedError

    def update(self, course_id: int, **changes: Any) -> Optional[Course]:
        raise NotImplementedError

    def delete_by_id(self, course_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def list_by_department(self, department_id: int) -> Sequence[Course]:
        raise NotImplementedError
