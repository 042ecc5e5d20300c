from __future__ import annotations

from flask import Flask

from ..common.http import register_crud, unique_fields
from ..common.payloads import FieldSpec, as_int, as_str
from ..core.enums import Role
from ..container import Container

COURSE_FIELDS = (
    FieldSpec("name", as_str),
    FieldSpec("code", as_str),
    FieldSpec("department_id", as_int),
    FieldSpec("description", as_str, required=False, nullable=True),
    FieldSpec("absence_threshold", as_int, required=False, nullable=True),
)


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        url="/api/courses",
        endpoint="courses",
        label="Course",
        repository=container.courses_repo,
        fields=COURSE_FIELDS,
        write_role=Role.ADMIN,
        list_filters={"departmentId": container.courses_repo.list_by_department},
        before_write=unique_fields(container.courses_repo, {"code": "Course code"}),
    )
