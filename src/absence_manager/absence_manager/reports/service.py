from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional

from ..absences.repository import AbsenceRepository
from ..common.datetime_utils import as_naive_utc
from ..core.constants import (
    DEFAULT_ABSENCE_THRESHOLD,
    DEFAULT_RECENT_ACTIVITY_LIMIT,
    DEFAULT_TOP_ABSENTEES_LIMIT,
    UNKNOWN_LABEL,
)
from ..core.enums import AbsenceStatus, Role
from ..courses.model import Course
from ..courses.repository import CourseRepository
from ..departments.repository import DepartmentRepository
from ..modules.repository import ModuleElementRepository, ModuleRepository
from ..relations.resolver import RelationshipResolver
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from ..users.repository import UserRepository
from .model import (
    AbsenteeRow,
    ActivityRow,
    CourseThresholdReport,
    StatisticsSummary,
    StudentAbsenceSummary,
    ThresholdBreachRow,
)

logger = logging.getLogger(__name__)


class ReportService:
    """Dashboard and report figures computed from the current store state.

    Read-only: nothing here writes, notifies or blocks. A dangling reference
    (deleted teacher, student, module element) shows up as ``UNKNOWN_LABEL``.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        departments: DepartmentRepository,
        courses: CourseRepository,
        modules: ModuleRepository,
        module_elements: ModuleElementRepository,
        students: StudentRepository,
        sessions: SessionRepository,
        absences: AbsenceRepository,
        resolver: RelationshipResolver,
    ):
        self._users = users
        self._departments = departments
        self._courses = courses
        self._modules = modules
        self._module_elements = module_elements
        self._students = students
        self._sessions = sessions
        self._absences = absences
        self._resolver = resolver

    def statistics(self) -> StatisticsSummary:
        return StatisticsSummary(
            students_count=len(self._students.list_all()),
            departments_count=len(self._departments.list_all()),
            courses_count=len(self._courses.list_all()),
            teachers_count=len(self._users.list_by_role(Role.TEACHER)),
            modules_count=len(self._modules.list_all()),
            absences_count=len(self._absences.list_all()),
        )

    def top_absentees(self, limit: int = DEFAULT_TOP_ABSENTEES_LIMIT) -> List[AbsenteeRow]:
        """Students with the most absent-status records.

        Ties are broken by ascending student id so the result is reproducible.
        """

        if limit <= 0:
            return []

        counts = Counter(a.student_id for a in self._absences.list_all() if a.status == AbsenceStatus.ABSENT)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]

        return [
            AbsenteeRow(
                student_id=student_id,
                student_name=self._student_name(student_id),
                absence_count=count,
            )
            for student_id, count in ranked
        ]

    def recent_activity(self, limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT) -> List[ActivityRow]:
        if limit <= 0:
            return []

        # sorted() is stable: sessions sharing a date keep insertion order.
        recent = sorted(self._sessions.list_all(), key=lambda s: as_naive_utc(s.date), reverse=True)[:limit]

        rows: List[ActivityRow] = []
        for s in recent:
            teacher = self._users.get_by_id(s.teacher_id)
            element = self._module_elements.get_by_id(s.module_element_id)
            absent = [a for a in self._resolver.absences_for_session(s.id) if a.status == AbsenceStatus.ABSENT]
            rows.append(
                ActivityRow(
                    session_id=s.id,
                    date=s.date,
                    teacher_name=teacher.full_name if teacher else UNKNOWN_LABEL,
                    module_element_name=element.name if element else UNKNOWN_LABEL,
                    type=s.type,
                    absences_count=len(absent),
                )
            )
        return rows

    def threshold_breaches(self, course_id: int) -> Optional[CourseThresholdReport]:
        """Students of the course whose absent count is strictly above its threshold.

        Returns None only when the course does not exist.
        """

        course = self._courses.get_by_id(course_id)
        if not course:
            return None
        return self._course_threshold_report(course)

    def threshold_overview(self) -> List[CourseThresholdReport]:
        return [self._course_threshold_report(c) for c in self._courses.list_all()]

    def student_absence_summary(self, student_id: int) -> StudentAbsenceSummary:
        records = self._resolver.absences_for_student(student_id)
        by_status = {status.value: 0 for status in AbsenceStatus}
        for a in records:
            by_status[AbsenceStatus(a.status).value] += 1

        return StudentAbsenceSummary(
            student_id=student_id,
            student_name=self._student_name(student_id),
            total=len(records),
            by_status=by_status,
        )

    def _course_threshold_report(self, course: Course) -> CourseThresholdReport:
        threshold = course.absence_threshold if course.absence_threshold is not None else DEFAULT_ABSENCE_THRESHOLD
        enrolled = self._students.list_by_course(course.id)

        breaches: List[ThresholdBreachRow] = []
        for student in enrolled:
            absent_count = sum(
                1 for a in self._resolver.absences_for_student(student.id) if a.status == AbsenceStatus.ABSENT
            )
            if absent_count > threshold:
                breaches.append(
                    ThresholdBreachRow(
                        student_id=student.id,
                        student_name=student.display_name,
                        absence_count=absent_count,
                    )
                )

        if breaches:
            logger.debug("course %s: %d student(s) above threshold %d", course.code, len(breaches), threshold)

        return CourseThresholdReport(
            course_id=course.id,
            course_name=course.name,
            course_code=course.code,
            absence_threshold=threshold,
            students_count=len(enrolled),
            breaches=breaches,
        )

    def _student_name(self, student_id: int) -> str:
        student = self._students.get_by_id(student_id)
        return student.display_name if student else UNKNOWN_LABEL
