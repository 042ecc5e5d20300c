from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_endpoint, register_crud, request_json, role_required
from ..common.payloads import FieldSpec, as_enum, as_int, as_str, parse_payload_list
from ..common.serialization import to_json
from ..core.enums import AbsenceStatus, Role
from ..container import Container

logger = logging.getLogger(__name__)

ABSENCE_FIELDS = (
    FieldSpec("session_id", as_int),
    FieldSpec("student_id", as_int),
    FieldSpec("status", as_enum(AbsenceStatus)),
    FieldSpec("notes", as_str, required=False, nullable=True),
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/absences/batch", methods=["POST"], endpoint="absences_batch_create")
    @role_required(Role.TEACHER)
    @json_endpoint("creating absences")
    def batch_create():
        items = parse_payload_list(request_json(), ABSENCE_FIELDS, label="absences")
        created = container.absences_repo.batch_create(items)
        logger.info("recorded %d attendance rows", len(created))
        return jsonify(to_json(list(created))), 201

    register_crud(
        app,
        url="/api/absences",
        endpoint="absences",
        label="Absence",
        repository=container.absences_repo,
        fields=ABSENCE_FIELDS,
        write_role=Role.TEACHER,
        list_filters={
            "sessionId": container.absences_repo.list_by_session,
            "studentId": container.absences_repo.list_by_student,
        },
    )
