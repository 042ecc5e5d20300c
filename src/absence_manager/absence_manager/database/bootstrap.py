from __future__ import annotations

import logging

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .store import MemoryStore

logger = logging.getLogger(__name__)

# username, full name, role. Demo password == username.
DEMO_USERS = (
    ("admin", "Administrator", Role.ADMIN),
    ("teacher", "Teacher", Role.TEACHER),
    ("head_d", "Department Head", Role.DEPARTMENT_HEAD),
)


def seed_demo_users(store: MemoryStore) -> int:
    """Create one demo account per role; skips usernames that already exist.

    Returns how many users were created.
    """

    created = 0
    for username, full_name, role in DEMO_USERS:
        if store.users.find_first(username=username):
            continue
        store.users.insert(
            username=username,
            password=generate_password_hash(username),
            full_name=full_name,
            email=f"{username}@example.com",
            role=role,
            department_id=None,
        )
        created += 1

    if created:
        logger.info("seeded %d demo users", created)
    return created
