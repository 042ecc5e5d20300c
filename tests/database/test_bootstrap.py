from __future__ import annotations

from werkzeug.security import check_password_hash

from src.absence_manager.absence_manager.core.enums import Role
from src.absence_manager.absence_manager.database.bootstrap import seed_demo_users
from src.absence_manager.absence_manager.database.store import MemoryStore


def test_seed_creates_one_user_per_role():
    store = MemoryStore()

    assert seed_demo_users(store) == 3

    users = store.users.all()
    assert [u.username for u in users] == ["admin", "teacher", "head_d"]
    assert {u.role for u in users} == {Role.ADMIN, Role.TEACHER, Role.DEPARTMENT_HEAD}
    assert check_password_hash(users[0].password, "admin")


def test_seed_is_idempotent():
    store = MemoryStore()
    seed_demo_users(store)

    assert seed_demo_users(store) == 0
    assert len(store.users) == 3
