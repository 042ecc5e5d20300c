from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from ..core.enums import SessionType


@dataclass(frozen=True)
class StatisticsSummary:
    students_count: int
    departments_count: int
    courses_count: int
    teachers_count: int
    modules_count: int
    absences_count: int


@dataclass(frozen=True)
class AbsenteeRow:
    student_id: int
    student_name: str
    absence_count: int


@dataclass(frozen=True)
class ActivityRow:
    """Read-model for the dashboard's recent sessions list."""

    session_id: int
    date: datetime
    teacher_name: str
    module_element_name: str
    type: SessionType
    absences_count: int


@dataclass(frozen=True)
class ThresholdBreachRow:
    student_id: int
    student_name: str
    absence_count: int


@dataclass(frozen=True)
class CourseThresholdReport:
    course_id: int
    course_name: str
    course_code: str
    absence_threshold: int
    students_count: int
    breaches: List[ThresholdBreachRow] = field(default_factory=list)


@dataclass(frozen=True)
class StudentAbsenceSummary:
    student_id: int
    student_name: str
    total: int
    by_status: Dict[str, int]
