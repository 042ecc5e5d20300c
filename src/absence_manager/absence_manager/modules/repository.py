from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Module, ModuleElement, TeacherModuleElement


class ModuleRepository(Protocol):
    def get_by_id(self, module_id: int) -> Optional[Module]:
        raise NotImplementedError

    def create(self, *, name: str, code: str, course_id: int, description: Optional[str] = None) -> Module:
        raise NotImplementedError

    def update(self, module_id: int, **changes: Any) -> Optional[Module]:
        raise NotImplementedError

    def delete_by_id(self, module_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Module]:
        raise NotImplementedError

    def list_by_course(self, course_id: int) -> Sequence[Module]:
        raise NotImplementedError


class ModuleElementRepository(Protocol):
    def get_by_id(self, element_id: int) -> Optional[ModuleElement]:
        raise NotImplementedError

    def create(self, *, name: str, code: str, module_id: int, description: Optional[str] = None) -> ModuleElement:
        raise NotImplementedError

    def update(self, element_id: int, **changes: Any) -> Optional[ModuleElement]:
        raise NotImplementedError

    def delete_by_id(self, element_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[ModuleElement]:
        raise NotImplementedError

    def list_by_module(self, module_id: int) -> Sequence[ModuleElement]:
        raise NotImplementedError


class TeacherAssignmentRepository(Protocol):
    """Teacher <-> module element join rows."""

    def assign_teacher(self, *, teacher_id: int, module_element_id: int) -> TeacherModuleElement:
        raise NotImplementedError

    def remove_teacher(self, *, teacher_id: int, module_element_id: int) -> bool:
        """Remove the first row matching both ids; False when none matches."""

        raise NotImplementedError

    def list_for_teacher(self, teacher_id: int) -> Sequence[TeacherModuleElement]:
        raise NotImplementedError

    def list_all(self) -> Sequence[TeacherModuleElement]:
        raise NotImplementedError
