from __future__ import annotations

from flask import Flask

from ..common.http import register_crud, unique_fields
from ..common.payloads import FieldSpec, as_str
from ..core.enums import Role
from ..container import Container

DEPARTMENT_FIELDS = (
    FieldSpec("name", as_str),
    FieldSpec("description", as_str, required=False, nullable=True),
)


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        url="/api/departments",
        endpoint="departments",
        label="Department",
        repository=container.departments_repo,
        fields=DEPARTMENT_FIELDS,
        write_role=Role.ADMIN,
        before_write=unique_fields(container.departments_repo, {"name": "Department name"}),
    )
