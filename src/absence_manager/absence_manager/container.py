from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.memory_absence_repository import MemoryAbsenceRepository
from .courses.memory_course_repository import MemoryCourseRepository
from .database.bootstrap import seed_demo_users
from .database.store import MemoryStore
from .departments.memory_department_repository import MemoryDepartmentRepository
from .modules.memory_module_repository import (
    MemoryModuleElementRepository,
    MemoryModuleRepository,
    MemoryTeacherAssignmentRepository,
)
from .relations.resolver import RelationshipResolver
from .reports.service import ReportService
from .sessions.memory_session_repository import MemorySessionRepository
from .students.memory_student_repository import (
    MemoryGroupAssignmentRepository,
    MemoryStudentGroupRepository,
    MemoryStudentRepository,
)
from .users.memory_user_repository import MemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    users_repo: MemoryUserRepository
    departments_repo: MemoryDepartmentRepository
    courses_repo: MemoryCourseRepository
    modules_repo: MemoryModuleRepository
    module_elements_repo: MemoryModuleElementRepository
    teacher_assignments_repo: MemoryTeacherAssignmentRepository
    students_repo: MemoryStudentRepository
    student_groups_repo: MemoryStudentGroupRepository
    group_assignments_repo: MemoryGroupAssignmentRepository
    sessions_repo: MemorySessionRepository
    absences_repo: MemoryAbsenceRepository

    resolver: RelationshipResolver
    auth_service: AuthService
    user_service: UserService
    report_service: ReportService


def build_container(*, store: Optional[MemoryStore] = None, seed_demo: bool = True) -> Container:
    """Wire repositories and services around one store.

    A fresh ``MemoryStore`` is created unless one is passed in; the demo
    accounts are seeded into it when ``seed_demo`` is set.
    """

    store = store or MemoryStore()
    if seed_demo:
        seed_demo_users(store)

    users_repo = MemoryUserRepository(store)
    departments_repo = MemoryDepartmentRepository(store)
    courses_repo = MemoryCourseRepository(store)
    modules_repo = MemoryModuleRepository(store)
    module_elements_repo = MemoryModuleElementRepository(store)
    teacher_assignments_repo = MemoryTeacherAssignmentRepository(store)
    students_repo = MemoryStudentRepository(store)
    student_groups_repo = MemoryStudentGroupRepository(store)
    group_assignments_repo = MemoryGroupAssignmentRepository(store)
    sessions_repo = MemorySessionRepository(store)
    absences_repo = MemoryAbsenceRepository(store)

    resolver = RelationshipResolver(
        students=students_repo,
        group_assignments=group_assignments_repo,
        module_elements=module_elements_repo,
        teacher_assignments=teacher_assignments_repo,
        absences=absences_repo,
    )
    report_service = ReportService(
        users=users_repo,
        departments=departments_repo,
        courses=courses_repo,
        modules=modules_repo,
        module_elements=module_elements_repo,
        students=students_repo,
        sessions=sessions_repo,
        absences=absences_repo,
        resolver=resolver,
    )

    return Container(
        store=store,
        users_repo=users_repo,
        departments_repo=departments_repo,
        courses_repo=courses_repo,
        modules_repo=modules_repo,
        module_elements_repo=module_elements_repo,
        teacher_assignments_repo=teacher_assignments_repo,
        students_repo=students_repo,
        student_groups_repo=student_groups_repo,
        group_assignments_repo=group_assignments_repo,
        sessions_repo=sessions_repo,
        absences_repo=absences_repo,
        resolver=resolver,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        report_service=report_service,
    )
