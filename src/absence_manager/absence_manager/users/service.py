from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty, require_unique
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    username: str
    full_name: str
    email: str
    role: Role
    department_id: Optional[int]


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid username")

        try:
            ok = check_password_hash(user.password, password)
        except ValueError:
            # e.g. a record created with a clear-text or corrupted password
            ok = False

        if not ok:
            logger.info("rejected login for %s", username)
            raise AuthenticationError("Invalid password")

        return to_session_user(user)

    def current_user(self, user_id: int) -> Optional[SessionUser]:
        user = self._users.get_by_id(user_id)
        return to_session_user(user) if user else None


class UserService:
    """Use case: manage accounts (admin).

    The repository stores whatever it is given; this is the layer that hashes
    passwords and keeps usernames and emails unique.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def list_accounts(self) -> Sequence[User]:
        return self._users.list_all()

    def get_account(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def create_account(
        self,
        *,
        username: str,
        password: str,
        full_name: str,
        email: str,
        role: Role,
        department_id: Optional[int] = None,
    ) -> User:
        username = require_non_empty(username, "Username")
        full_name = require_non_empty(full_name, "Full name")
        email = require_non_empty(email, "Email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        existing = self._users.list_all()
        require_unique(existing, field="username", value=username, label="Username")
        require_unique(existing, field="email", value=email, label="Email")

        user = self._users.create(
            username=username,
            password=generate_password_hash(password),
            full_name=full_name,
            email=email,
            role=role,
            department_id=department_id,
        )
        logger.info("created %s account %s (id=%d)", role.value, username, user.id)
        return user

    def update_account(self, user_id: int, **changes: Any) -> Optional[User]:
        """Partial update; returns None when the account does not exist."""

        if not self._users.get_by_id(user_id):
            return None

        existing = self._users.list_all()
        if "username" in changes:
            changes["username"] = require_non_empty(changes["username"], "Username")
            require_unique(existing, field="username", value=changes["username"], label="Username", exclude_id=user_id)
        if "email" in changes:
            changes["email"] = require_non_empty(changes["email"], "Email")
            require_unique(existing, field="email", value=changes["email"], label="Email", exclude_id=user_id)
        if "password" in changes:
            require_min_length(changes["password"], "Password", MIN_PASSWORD_LENGTH)
            changes["password"] = generate_password_hash(changes["password"])

        return self._users.update(user_id, **changes)

    def delete_account(self, *, current_user_id: int, user_id: int) -> bool:
        if int(current_user_id) == int(user_id):
            raise ValidationError("You cannot delete your own account")
        return self._users.delete_by_id(user_id)


def to_session_user(user: User) -> SessionUser:
    return SessionUser(
        user_id=user.id,
        username=user.username,
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        department_id=user.department_id,
    )
