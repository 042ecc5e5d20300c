from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import Module, ModuleElement, TeacherModuleElement
from .repository import ModuleElementRepository, ModuleRepository, TeacherAssignmentRepository


class MemoryModuleRepository(ModuleRepository):
    def __init__(self, store: MemoryStore):
        self._modules = store.modules

    def get_by_id(self, module_id: int) -> Optional[Module]:
        return self._modules.get(module_id)

    def create(self, *, name: str, code: str, course_id: int, description: Optional[str] = None) -> Module:
        return self._modules.insert(name=name, code=code, course_id=course_id, description=description)

    def update(self, module_id: int, **changes: Any) -> Optional[Module]:
        return self._modules.update(module_id, **changes)

    def delete_by_id(self, module_id: int) -> bool:
        return self._modules.delete(module_id)

    def list_all(self) -> Sequence[Module]:
        return self._modules.all()

    def list_by_course(self, course_id: int) -> Sequence[Module]:
        return self._modules.filter(course_id=course_id)


class MemoryModuleElementRepository(ModuleElementRepository):
    def __init__(self, store: MemoryStore):
        self._elements = store.module_elements

    def get_by_id(self, element_id: int) -> Optional[ModuleElement]:
        return self._elements.get(element_id)

    def create(self, *, name: str, code: str, module_id: int, description: Optional[str] = None) -> ModuleElement:
        return self._elements.insert(name=name, code=code, module_id=module_id, description=description)

    def update(self, element_id: int, **changes: Any) -> Optional[ModuleElement]:
        return self._elements.update(element_id, **changes)

    def delete_by_id(self, element_id: int) -> bool:
        return self._elements.delete(element_id)

    def list_all(self) -> Sequence[ModuleElement]:
        return self._elements.all()

    def list_by_module(self, module_id: int) -> Sequence[ModuleElement]:
        return self._elements.filter(module_id=module_id)


class MemoryTeacherAssignmentRepository(TeacherAssignmentRepository):
    def __init__(self, store: MemoryStore):
        self._assignments = store.teacher_module_elements

    def assign_teacher(self, *, teacher_id: int, module_element_id: int) -> TeacherModuleElement:
        return self._assignments.insert(teacher_id=teacher_id, module_element_id=module_element_id)

    def remove_teacher(self, *, teacher_id: int, module_element_id: int) -> bool:
        return self._assignments.delete_first(teacher_id=teacher_id, module_element_id=module_element_id)

    def list_for_teacher(self, teacher_id: int) -> Sequence[TeacherModuleElement]:
        return self._assignments.filter(teacher_id=teacher_id)

    def list_all(self) -> Sequence[TeacherModuleElement]:
        return self._assignments.all()
