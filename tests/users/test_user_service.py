from __future__ import annotations

import pytest

from src.absence_manager.absence_manager.core.enums import Role
from src.absence_manager.absence_manager.core.exceptions import AuthenticationError, ValidationError


def test_authenticate_seeded_admin(container):
    s_user = container.auth_service.authenticate("admin", "admin")

    assert s_user.role == Role.ADMIN
    assert s_user.full_name == "Administrator"


def test_auth_wrong_password_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("admin", "wrong")


def test_auth_unknown_user_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("nobody", "x")


def test_auth_clear_text_password_record_is_rejected(container):
    container.users_repo.create(
        username="legacy", password="legacy", full_name="L", email="l@example.com", role=Role.TEACHER
    )

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("legacy", "legacy")


def test_create_account_hashes_password(container):
    user = container.user_service.create_account(
        username="prof", password="secret", full_name="Prof", email="prof@example.com", role=Role.TEACHER
    )

    assert user.password != "secret"
    assert container.auth_service.authenticate("prof", "secret").user_id == user.id


def test_create_account_rejects_duplicate_username_and_email(container):
    with pytest.raises(ValidationError):
        container.user_service.create_account(
            username="admin", password="secret", full_name="X", email="new@example.com", role=Role.TEACHER
        )
    with pytest.raises(ValidationError):
        container.user_service.create_account(
            username="new", password="secret", full_name="X", email="admin@example.com", role=Role.TEACHER
        )


def test_repository_itself_allows_duplicates(container):
    container.users_repo.create(username="admin", password="x", full_name="Dup", email="d@example.com", role=Role.ADMIN)

    assert len([u for u in container.users_repo.list_all() if u.username == "admin"]) == 2


def test_update_account_keeps_own_email_and_rehashes_password(container):
    teacher = container.users_repo.get_by_username("teacher")

    updated = container.user_service.update_account(teacher.id, email="teacher@example.com", password="newpass")

    assert updated.email == "teacher@example.com"
    assert updated.full_name == "Teacher"
    assert container.auth_service.authenticate("teacher", "newpass").user_id == teacher.id


def test_update_missing_account_returns_none(container):
    assert container.user_service.update_account(999, full_name="Ghost") is None


def test_cannot_delete_own_account(container):
    with pytest.raises(ValidationError):
        container.user_service.delete_account(current_user_id=1, user_id=1)
