from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import GroupType


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    ``student_id`` is the institution's external registration number; ``id``
    is the internal identifier every other record refers to.
    """

    id: int
    student_id: str
    first_name: str
    last_name: str
    email: str
    course_id: int

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class StudentGroup:
    id: int
    name: str
    type: GroupType
    course_id: int


@dataclass(frozen=True)
class StudentGroupAssignment:
    """Join row: Student <-> StudentGroup. Duplicate pairs are allowed."""

    id: int
    student_id: int
    group_id: int
