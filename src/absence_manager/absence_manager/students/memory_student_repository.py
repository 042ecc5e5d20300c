from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import GroupType
from ..database.store import MemoryStore
from .model import Student, StudentGroup, StudentGroupAssignment
from .repository import GroupAssignmentRepository, StudentGroupRepository, StudentRepository


class MemoryStudentRepository(StudentRepository):
    def __init__(self, store: MemoryStore):
        self._students = store.students

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        return self._students.get(student_pk)

    def create(
        self,
        *,
        student_id: str,
        first_name: str,
        last_name: str,
        email: str,
        course_id: int,
    ) -> Student:
        return self._students.insert(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            course_id=course_id,
        )

    def update(self, student_pk: int, **changes: Any) -> Optional[Student]:
        return self._students.update(student_pk, **changes)

    def delete_by_id(self, student_pk: int) -> bool:
        return self._students.delete(student_pk)

    def list_all(self) -> Sequence[Student]:
        return self._students.all()

    def list_by_course(self, course_id: int) -> Sequence[Student]:
        return self._students.filter(course_id=course_id)


class MemoryStudentGroupRepository(StudentGroupRepository):
    def __init__(self, store: MemoryStore):
        self._groups = store.student_groups

    def get_by_id(self, group_id: int) -> Optional[StudentGroup]:
        return self._groups.get(group_id)

    def create(self, *, name: str, type: GroupType, course_id: int) -> StudentGroup:
        return self._groups.insert(name=name, type=type, course_id=course_id)

    def update(self, group_id: int, **changes: Any) -> Optional[StudentGroup]:
        return self._groups.update(group_id, **changes)

    def delete_by_id(self, group_id: int) -> bool:
        return self._groups.delete(group_id)

    def list_all(self) -> Sequence[StudentGroup]:
        return self._groups.all()

    def list_by_course(self, course_id: int) -> Sequence[StudentGroup]:
        return self._groups.filter(course_id=course_id)


class MemoryGroupAssignmentRepository(GroupAssignmentRepository):
    def __init__(self, store: MemoryStore):
        self._assignments = store.student_group_assignments

    def assign_student(self, *, student_id: int, group_id: int) -> StudentGroupAssignment:
        return self._assignments.insert(student_id=student_id, group_id=group_id)

    def remove_student(self, *, student_id: int, group_id: int) -> bool:
        return self._assignments.delete_first(student_id=student_id, group_id=group_id)

    def list_for_group(self, group_id: int) -> Sequence[StudentGroupAssignment]:
        return self._assignments.filter(group_id=group_id)

    def list_all(self) -> Sequence[StudentGroupAssignment]:
        return self._assignments.all()
