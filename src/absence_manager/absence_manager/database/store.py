from __future__ import annotations

from dataclasses import dataclass, field

from ..absences.model import Absence
from ..courses.model import Course
from ..departments.model import Department
from ..modules.model import Module, ModuleElement, TeacherModuleElement
from ..sessions.model import Session
from ..students.model import Student, StudentGroup, StudentGroupAssignment
from ..users.model import User
from .memory_base import MemoryTable


@dataclass
class MemoryStore:
    """Owns every collection of the application.

    Note: build one instance per process (see ``container.build_container``)
    or one per test. Data lives only as long as the instance does.
    """

    users: MemoryTable[User] = field(default_factory=lambda: MemoryTable(User, "users"))
    departments: MemoryTable[Department] = field(default_factory=lambda: MemoryTable(Department, "departments"))
    courses: MemoryTable[Course] = field(default_factory=lambda: MemoryTable(Course, "courses"))
    modules: MemoryTable[Module] = field(default_factory=lambda: MemoryTable(Module, "modules"))
    module_elements: MemoryTable[ModuleElement] = field(
        default_factory=lambda: MemoryTable(ModuleElement, "module_elements")
    )
    teacher_module_elements: MemoryTable[TeacherModuleElement] = field(
        default_factory=lambda: MemoryTable(TeacherModuleElement, "teacher_module_elements")
    )
    students: MemoryTable[Student] = field(default_factory=lambda: MemoryTable(Student, "students"))
    student_groups: MemoryTable[StudentGroup] = field(
        default_factory=lambda: MemoryTable(StudentGroup, "student_groups")
    )
    student_group_assignments: MemoryTable[StudentGroupAssignment] = field(
        default_factory=lambda: MemoryTable(StudentGroupAssignment, "student_group_assignments")
    )
    sessions: MemoryTable[Session] = field(default_factory=lambda: MemoryTable(Session, "sessions"))
    absences: MemoryTable[Absence] = field(default_factory=lambda: MemoryTable(Absence, "absences"))

    def table_sizes(self) -> dict[str, int]:
        return {
            t.name: len(t)
            for t in (
                self.users,
                self.departments,
                self.courses,
                self.modules,
                self.module_elements,
                self.teacher_module_elements,
                self.students,
                self.student_groups,
                self.student_group_assignments,
                self.sessions,
                self.absences,
            )
        }
