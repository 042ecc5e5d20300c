from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_ABSENCE_THRESHOLD


@dataclass(frozen=True)
class Course:
    """Domain entity: Course (a degree track inside a department).

    ``absence_threshold`` is a reporting threshold only; nothing is blocked or
    notified when a student crosses it.
    """

    id: int
    name: str
    code: str
    department_id: int
    description: Optional[str] = None
    absence_threshold: Optional[int] = DEFAULT_ABSENCE_THRESHOLD
