from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Role
from ..database.store import MemoryStore
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._users = store.users

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.find_first(username=username)

    def create(
        self,
        *,
        username: str,
        password: str,
        full_name: str,
        email: str,
        role: Role,
        department_id: Optional[int] = None,
    ) -> User:
        return self._users.insert(
            username=username,
            password=password,
            full_name=full_name,
            email=email,
            role=role,
            department_id=department_id,
        )

    def update(self, user_id: int, **changes: Any) -> Optional[User]:
        return self._users.update(user_id, **changes)

    def delete_by_id(self, user_id: int) -> bool:
        return self._users.delete(user_id)

    def list_all(self) -> Sequence[User]:
        return self._users.all()

    def list_by_role(self, role: Role) -> Sequence[User]:
        return self._users.filter(role=role)
