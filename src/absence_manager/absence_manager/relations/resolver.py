from __future__ import annotations

from typing import Sequence

from ..absences.model import Absence
from ..absences.repository import AbsenceRepository
from ..modules.model import ModuleElement
from ..modules.repository import ModuleElementRepository, TeacherAssignmentRepository
from ..students.model import Student
from ..students.repository import GroupAssignmentRepository, StudentRepository


class RelationshipResolver:
    """Join queries the single-key repository filters cannot express.

    Everything is recomputed on each call from the current repository state.
    """

    def __init__(
        self,
        *,
        students: StudentRepository,
        group_assignments: GroupAssignmentRepository,
        module_elements: ModuleElementRepository,
        teacher_assignments: TeacherAssignmentRepository,
        absences: AbsenceRepository,
    ):
        self._students = students
        self._group_assignments = group_assignments
        self._module_elements = module_elements
        self._teacher_assignments = teacher_assignments
        self._absences = absences

    def students_in_group(self, group_id: int) -> Sequence[Student]:
        """Students assigned to the group, in student list order."""

        member_ids = {a.student_id for a in self._group_assignments.list_for_group(group_id)}
        return [s for s in self._students.list_all() if s.id in member_ids]

    def module_elements_for_teacher(self, teacher_id: int) -> Sequence[ModuleElement]:
        element_ids = {a.module_element_id for a in self._teacher_assignments.list_for_teacher(teacher_id)}
        return [e for e in self._module_elements.list_all() if e.id in element_ids]

    def absences_for_session(self, session_id: int) -> Sequence[Absence]:
        return self._absences.list_by_session(session_id)

    def absences_for_student(self, student_id: int) -> Sequence[Absence]:
        return self._absences.list_by_student(student_id)
