from __future__ import annotations

from flask import Flask

from ..common.http import register_crud
from ..common.payloads import FieldSpec, as_datetime, as_enum, as_int, as_str
from ..core.enums import Role, SessionType
from ..container import Container

SESSION_FIELDS = (
    FieldSpec("date", as_datetime),
    FieldSpec("type", as_enum(SessionType)),
    FieldSpec("module_element_id", as_int),
    FieldSpec("teacher_id", as_int),
    FieldSpec("group_id", as_int, required=False, nullable=True),
    FieldSpec("notes", as_str, required=False, nullable=True),
)


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        url="/api/sessions",
        endpoint="sessions",
        label="Session",
        repository=container.sessions_repo,
        fields=SESSION_FIELDS,
        read_role=Role.TEACHER,
        write_role=Role.TEACHER,
        list_filters={
            "teacherId": container.sessions_repo.list_by_teacher,
            "moduleElementId": container.sessions_repo.list_by_module_element,
        },
    )
