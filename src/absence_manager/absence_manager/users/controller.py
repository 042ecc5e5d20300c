from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.http import json_endpoint, json_error, login_required, request_json, role_required
from ..common.payloads import FieldSpec, as_enum, as_int, as_str, parse_payload
from ..common.serialization import to_json
from ..core.enums import Role
from ..container import Container

logger = logging.getLogger(__name__)

USER_FIELDS = (
    FieldSpec("username", as_str),
    FieldSpec("password", as_str),
    FieldSpec("full_name", as_str),
    FieldSpec("email", as_str),
    FieldSpec("role", as_enum(Role)),
    FieldSpec("department_id", as_int, required=False, nullable=True),
)


def public_user(user) -> dict:
    return to_json(user, exclude=("password",))


def session_user_json(s_user) -> dict:
    return {"id": s_user.user_id, **to_json(s_user, exclude=("user_id",))}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    @json_endpoint("logging in")
    def login():
        data = request_json()
        if not isinstance(data, dict):
            data = {}
        username = data.get("username") or ""
        password = data.get("password") or ""

        s_user = container.auth_service.authenticate(str(username), str(password))

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["role"] = s_user.role.value
        logger.info("user %s logged in", s_user.username)
        return jsonify(session_user_json(s_user))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out successfully"})

    @app.route("/api/auth/session", methods=["GET"], endpoint="auth_session")
    def current_session():
        user_id = session.get("user_id")
        s_user = container.auth_service.current_user(int(user_id)) if user_id is not None else None
        if not s_user:
            return jsonify({"authenticated": False}), 401
        return jsonify({"authenticated": True, "user": session_user_json(s_user)})

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @role_required(Role.ADMIN)
    @json_endpoint("fetching users")
    def list_users():
        return jsonify([public_user(u) for u in container.user_service.list_accounts()])

    @app.route("/api/teachers", methods=["GET"], endpoint="teachers_list")
    @login_required
    @json_endpoint("fetching teachers")
    def list_teachers():
        return jsonify([public_user(u) for u in container.users_repo.list_by_role(Role.TEACHER)])

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @role_required(Role.ADMIN)
    @json_endpoint("creating user")
    def create_user():
        values = parse_payload(request_json(), USER_FIELDS, label="user")
        user = container.user_service.create_account(**values)
        return jsonify(public_user(user)), 201

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="users_get")
    @role_required(Role.ADMIN)
    @json_endpoint("fetching user")
    def get_user(user_id: int):
        user = container.user_service.get_account(user_id)
        if not user:
            return json_error("User not found", 404)
        return jsonify(public_user(user))

    @app.route("/api/users/<int:user_id>", methods=["PUT", "PATCH"], endpoint="users_update")
    @role_required(Role.ADMIN)
    @json_endpoint("updating user")
    def update_user(user_id: int):
        values = parse_payload(request_json(), USER_FIELDS, partial=True, label="user")
        user = container.user_service.update_account(user_id, **values)
        if not user:
            return json_error("User not found", 404)
        return jsonify(public_user(user))

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="users_delete")
    @role_required(Role.ADMIN)
    @json_endpoint("deleting user")
    def delete_user(user_id: int):
        if not container.user_service.delete_account(current_user_id=session["user_id"], user_id=user_id):
            return json_error("User not found", 404)
        return jsonify({"message": "User deleted successfully"})
