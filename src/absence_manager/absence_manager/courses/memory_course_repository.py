from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_ABSENCE_THRESHOLD
from ..database.store import MemoryStore
from .model import Course
from .repository import CourseRepository


class MemoryCourseRepository(CourseRepository):
    def __init__(self, store: MemoryStore):
        self._courses = store.courses

    def get_by_id(self, course_id: int) -> Optional[Course]:
        return self._courses.get(course_id)

    def create(
        self,
        *,
        name: str,
        code: str,
        department_id: int,
        description: Optional[str] = None,
        absence_threshold: Optional[int] = DEFAULT_ABSENCE_THRESHOLD,
    ) -> Course:
        return self._courses.insert(
            name=name,
            code=code,
            department_id=department_id,
            description=description,
            absence_threshold=absence_threshold,
        )

    def update(self, course_id: int, **changes: Any) -> Optional[Course]:
        return self._courses.update(course_id, **changes)

    def delete_by_id(self, course_id: int) -> bool:
        return self._courses.delete(course_id)

    def list_all(self) -> Sequence[Course]:
        return self._courses.all()

    def list_by_department(self, department_id: int) -> Sequence[Course]:
        return self._courses.filter(department_id=department_id)
