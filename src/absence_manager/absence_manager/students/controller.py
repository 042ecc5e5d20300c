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
    unique_fields,
)
from ..common.payloads import FieldSpec, as_enum, as_int, as_str, parse_payload
from ..common.serialization import to_json
from ..core.enums import GroupType, Role
from ..core.exceptions import ValidationError
from ..container import Container

STUDENT_FIELDS = (
    FieldSpec("student_id", as_str),
    FieldSpec("first_name", as_str),
    FieldSpec("last_name", as_str),
    FieldSpec("email", as_str),
    FieldSpec("course_id", as_int),
)

STUDENT_GROUP_FIELDS = (
    FieldSpec("name", as_str),
    FieldSpec("type", as_enum(GroupType)),
    FieldSpec("course_id", as_int),
)

GROUP_ASSIGNMENT_FIELDS = (
    FieldSpec("student_id", as_int),
    FieldSpec("group_id", as_int),
)


def register(app: Flask, container: Container) -> None:
    register_crud(
        app,
        url="/api/students",
        endpoint="students",
        label="Student",
        repository=container.students_repo,
        fields=STUDENT_FIELDS,
        write_role=Role.ADMIN,
        list_filters={"courseId": container.students_repo.list_by_course},
        before_write=unique_fields(container.students_repo, {"student_id": "Student ID", "email": "Student email"}),
    )
    register_crud(
        app,
        url="/api/student-groups",
        endpoint="student_groups",
        label="Student group",
        repository=container.student_groups_repo,
        fields=STUDENT_GROUP_FIELDS,
        write_role=Role.DEPARTMENT_HEAD,
        list_filters={"courseId": container.student_groups_repo.list_by_course},
    )

    @app.route("/api/student-group-assignments", methods=["POST"], endpoint="student_group_assignments_create")
    @role_required(Role.DEPARTMENT_HEAD)
    @json_endpoint("creating assignment")
    def assign_student():
        values = parse_payload(request_json(), GROUP_ASSIGNMENT_FIELDS, label="assignment")
        assignment = container.group_assignments_repo.assign_student(**values)
        return jsonify(to_json(assignment)), 201

    @app.route("/api/student-group-assignments", methods=["DELETE"], endpoint="student_group_assignments_delete")
    @role_required(Role.DEPARTMENT_HEAD)
    @json_endpoint("deleting assignment")
    def remove_student():
        student_id = query_int("studentId")
        group_id = query_int("groupId")
        if student_id is None or group_id is None:
            raise ValidationError("Invalid student ID or group ID")

        if not container.group_assignments_repo.remove_student(student_id=student_id, group_id=group_id):
            return json_error("Assignment not found", 404)
        return jsonify({"message": "Assignment removed successfully"})

    @app.route("/api/student-groups/<int:group_id>/students", methods=["GET"], endpoint="student_group_students")
    @login_required
    @json_endpoint("fetching students by group")
    def students_in_group(group_id: int):
        return jsonify(to_json(list(container.resolver.students_in_group(group_id))))

    @app.route("/api/students/<int:student_id>/absence-summary", methods=["GET"], endpoint="student_absence_summary")
    @login_required
    @json_endpoint("fetching absence summary")
    def absence_summary(student_id: int):
        return jsonify(to_json(container.report_service.student_absence_summary(student_id)))
