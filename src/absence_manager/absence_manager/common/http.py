"""Shared pieces of the JSON controller layer: guards, error mapping and CRUD routes."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .payloads import FieldSpec, parse_payload
from .serialization import to_json
from .validators import require_unique

logger = logging.getLogger(__name__)

WriteHook = Callable[[Dict[str, Any], Optional[int]], None]


def json_error(message: str, status: int, errors: Optional[Sequence[dict]] = None):
    body: Dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = list(errors)
    return jsonify(body), status


def current_role() -> Optional[Role]:
    raw = session.get("role")
    try:
        return Role(raw) if raw else None
    except ValueError:
        return None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Unauthorized", 401)
        return view(*args, **kwargs)

    return wrapper


def role_required(required: Role):
    """Allow ``required`` and every role above it (admin > departmentHead > teacher)."""

    labels = {
        Role.ADMIN: "Admin",
        Role.DEPARTMENT_HEAD: "Department Head",
        Role.TEACHER: "Teacher",
    }

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return json_error("Unauthorized", 401)

            role = current_role()
            if role is None or not role.satisfies(required):
                return json_error(f"Forbidden - {labels[required]} access required", 403)

            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_endpoint(action: str):
    """Map domain exceptions to HTTP statuses; anything unexpected becomes a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return json_error(str(e), 400, e.errors)
            except AuthenticationError as e:
                return json_error(str(e), 401)
            except AuthorizationError as e:
                return json_error(str(e), 403)
            except Exception:
                logger.exception("unhandled error while %s", action)
                return json_error(f"Error {action}", 500)

        return wrapper

    return decorator


def query_int(name: str) -> Optional[int]:
    """Integer query parameter; None when absent, ValidationError when malformed."""

    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {name}", errors=[{"field": name, "message": "Expected integer"}]) from None


def request_json() -> Any:
    return request.get_json(silent=True)


def unique_fields(repository: Any, labels: Mapping[str, str]) -> WriteHook:
    """Write hook rejecting values already used by another record of ``repository``."""

    def check(values: Dict[str, Any], record_id: Optional[int]) -> None:
        existing = None
        for field, label in labels.items():
            if field not in values:
                continue
            if existing is None:
                existing = repository.list_all()
            require_unique(existing, field=field, value=values[field], label=label, exclude_id=record_id)

    return check


def register_crud(
    app: Flask,
    *,
    url: str,
    endpoint: str,
    label: str,
    repository: Any,
    fields: Sequence[FieldSpec],
    write_role: Role,
    read_role: Optional[Role] = None,
    list_filters: Optional[Mapping[str, Callable[[int], Sequence[Any]]]] = None,
    before_write: Optional[WriteHook] = None,
) -> None:
    """Register list/get/create/update/delete JSON routes for one repository.

    ``list_filters`` maps a query parameter to a repository filter; the first
    parameter present in the request wins. ``label`` is the human name used in
    messages ("Course", "Module element", ...).
    """

    read_guard = role_required(read_role) if read_role else login_required
    write_guard = role_required(write_role)
    filters = dict(list_filters or {})
    noun = label.lower()

    @read_guard
    @json_endpoint(f"fetching {noun}s")
    def list_view():
        for param, lookup in filters.items():
            value = query_int(param)
            if value is not None:
                return jsonify(to_json(list(lookup(value))))
        return jsonify(to_json(list(repository.list_all())))

    @write_guard
    @json_endpoint(f"creating {noun}")
    def create_view():
        values = parse_payload(request_json(), fields, label=noun)
        if before_write:
            before_write(values, None)
        record = repository.create(**values)
        return jsonify(to_json(record)), 201

    @read_guard
    @json_endpoint(f"fetching {noun}")
    def get_view(record_id: int):
        record = repository.get_by_id(record_id)
        if not record:
            return json_error(f"{label} not found", 404)
        return jsonify(to_json(record))

    @write_guard
    @json_endpoint(f"updating {noun}")
    def update_view(record_id: int):
        values = parse_payload(request_json(), fields, partial=True, label=noun)
        if before_write:
            before_write(values, record_id)
        record = repository.update(record_id, **values)
        if not record:
            return json_error(f"{label} not found", 404)
        return jsonify(to_json(record))

    @write_guard
    @json_endpoint(f"deleting {noun}")
    def delete_view(record_id: int):
        if not repository.delete_by_id(record_id):
            return json_error(f"{label} not found", 404)
        return jsonify({"message": f"{label} deleted successfully"})

    app.add_url_rule(url, f"{endpoint}_list", list_view, methods=["GET"])
    app.add_url_rule(url, f"{endpoint}_create", create_view, methods=["POST"])
    app.add_url_rule(f"{url}/<int:record_id>", f"{endpoint}_get", get_view, methods=["GET"])
    app.add_url_rule(f"{url}/<int:record_id>", f"{endpoint}_update", update_view, methods=["PUT", "PATCH"])
    app.add_url_rule(f"{url}/<int:record_id>", f"{endpoint}_delete", delete_view, methods=["DELETE"])
