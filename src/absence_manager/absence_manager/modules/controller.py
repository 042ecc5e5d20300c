from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import (
    json_endpoint,
    json_error,
    login_required,
    query_int,
    register_crud,
    request_json,
    role_required,
)
from ..common.payloads import FieldSpec, as_int, as_str, parse_payload
from ..common.serialization import to_json
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container

MODULE_FIELDS = (
    FieldSpec("name", as_str),
    FieldSpec("code", as_str),
    FieldSpec("course_id", as_int),
    FieldSpec("description", as_str, required=False, nullable=True),
)

MODULE_ELEMENT_FIELDS = (
    FieldSpec("name", as_str),
    FieldSpec("code", as_str),
    FieldSpec("module_id", as_int),
    FieldSpec("description", as_str, required=False, nullable=True),
)

TEACHER_ASSIGNMENT_FIELDS = (
    FieldSpec("teacher_id", as_int),
    FieldSpec("module_element_id", as_int),
)


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        url="/api/modules",
        endpoint="modules",
        label="Module",
        repository=container.modules_repo,
        fields=MODULE_FIELDS,
        write_role=Role.ADMIN,
        list_filters={"courseId": container.modules_repo.list_by_course},
    )
    register_crud(
        app,
        url="/api/module-elements",
        endpoint="module_elements",
        label="Module element",
        repository=container.module_elements_repo,
        fields=MODULE_ELEMENT_FIELDS,
        write_role=Role.ADMIN,
        list_filters={"moduleId": container.module_elements_repo.list_by_module},
    )

    @app.route("/api/teacher-module-elements", methods=["POST"], endpoint="teacher_module_elements_create")
    @role_required(Role.ADMIN)
    @json_endpoint("creating assignment")
    def assign_teacher():
        values = parse_payload(request_json(), TEACHER_ASSIGNMENT_FIELDS, label="assignment")
        assignment = container.teacher_assignments_repo.assign_teacher(**values)
        return jsonify(to_json(assignment)), 201

    @app.route("/api/teacher-module-elements", methods=["DELETE"], endpoint="teacher_module_elements_delete")
    @role_required(Role.ADMIN)
    @json_endpoint("deleting assignment")
    def remove_teacher():
        teacher_id = query_int("teacherId")
        module_element_id = query_int("moduleElementId")
        if teacher_id is None or module_element_id is None:
            raise ValidationError("Invalid teacher ID or module element ID")

        if not container.teacher_assignments_repo.remove_teacher(
            teacher_id=teacher_id, module_element_id=module_element_id
        ):
            return json_error("Assignment not found", 404)
        return jsonify({"message": "Assignment removed successfully"})

    @app.route("/api/teacher-module-elements", methods=["GET"], endpoint="teacher_module_elements_list")
    @login_required
    @json_endpoint("fetching assignments")
    def list_teacher_assignments():
        teacher_id = query_int("teacherId")
        if teacher_id is None:
            raise ValidationError("Invalid teacher ID")
        return jsonify(to_json(list(container.teacher_assignments_repo.list_for_teacher(teacher_id))))

    @app.route("/api/teachers/<int:teacher_id>/module-elements", methods=["GET"], endpoint="teacher_module_elements")
    @login_required
    @json_endpoint("fetching module elements by teacher")
    def module_elements_for_teacher(teacher_id: int):
        return jsonify(to_json(list(container.resolver.module_elements_for_teacher(teacher_id))))
