from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import GroupType
from .model import Student, StudentGroup, StudentGroupAssignment


class StudentRepository(Protocol):
    def get_by_id(self, student_pk: int) -> Optional[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_id: str,
        first_name: str,
        last_name: str,
        email: str,
        course_id: int,
    ) -> Student:
        raise NotImplementedError

    def update(self, student_pk: int, **changes: Any) -> Optional[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_pk: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_course(self, course_id: int) -> Sequence[Student]:
        raise NotImplementedError


class StudentGroupRepository(Protocol):
    def get_by_id(self, group_id: int) -> Optional[StudentGroup]:
        raise NotImplementedError

    def create(self, *, name: str, type: GroupType, course_id: int) -> StudentGroup:
        raise NotImplementedError

    def update(self, group_id: int, **changes: Any) -> Optional[StudentGroup]:
        raise NotImplementedError

    def delete_by_id(self, group_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[StudentGroup]:
        raise NotImplementedError

    def list_by_course(self, course_id: int) -> Sequence[StudentGroup]:
        raise NotImplementedError


class GroupAssignmentRepository(Protocol):
    """Student <-> group join rows."""

    def assign_student(self, *, student_id: int, group_id: int) -> StudentGroupAssignment:
        raise NotImplementedError

    def remove_student(self, *, student_id: int, group_id: int) -> bool:
        """Remove the first row matching both ids; False when none matches."""

        raise NotImplementedError

    def list_for_group(self, group_id: int) -> Sequence[StudentGroupAssignment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[StudentGroupAssignment]:
        raise NotImplementedError
