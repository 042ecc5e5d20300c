from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AbsenceStatus


@dataclass(frozen=True)
class Absence:
    """Attendance record of one student for one session."""

    id: int
    session_id: int
    student_id: int
    status: AbsenceStatus
    notes: Optional[str] = None
