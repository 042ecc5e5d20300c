from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    DEPARTMENT_HEAD = "departmentHead"
    TEACHER = "teacher"

    def satisfies(self, required: "Role") -> bool:
        """Admins can do everything a department head can, who can do everything a teacher can."""

        return _ROLE_RANK[self] >= _ROLE_RANK[required]


_ROLE_RANK = {
    Role.TEACHER: 1,
    Role.DEPARTMENT_HEAD: 2,
    Role.ADMIN: 3,
}


class GroupType(str, Enum):
    """Kind of student group: tutorial (TD) or practical lab (TP)."""

    TD = "TD"
    TP = "TP"


class SessionType(str, Enum):
    COURSE = "course"
    TD = "TD"
    TP = "TP"


class AbsenceStatus(str, Enum):
    """Attendance status recorded for one student in one session."""

    PRESENT = "present"
    ABSENT = "absent"
    JUSTIFIED = "justified"
    UNJUSTIFIED = "unjustified"
