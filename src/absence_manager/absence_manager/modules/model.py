from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Module:
    id: int
    name: str
    code: str
    course_id: int
    description: Optional[str] = None


@dataclass(frozen=True)
class ModuleElement:
    """Smallest teachable unit of a module (lecture, TD, TP, ...)."""

    id: int
    name: str
    code: str
    module_id: int
    description: Optional[str] = None


@dataclass(frozen=True)
class TeacherModuleElement:
    """Join row: teacher (User) <-> ModuleElement. Duplicate pairs are allowed."""

    id: int
    teacher_id: int
    module_element_id: int
