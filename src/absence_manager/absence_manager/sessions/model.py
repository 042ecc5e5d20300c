from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import SessionType


@dataclass(frozen=True)
class Session:
    """One meeting of a module element on a date, led by one teacher."""

    id: int
    date: datetime
    type: SessionType
    module_element_id: int
    teacher_id: int
    group_id: Optional[int] = None
    notes: Optional[str] = None
