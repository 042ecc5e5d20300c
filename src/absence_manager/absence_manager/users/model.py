from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; ``password`` holds the werkzeug hash, never the clear text.
    """

    id: int
    username: str
    password: str
    full_name: str
    email: str
    role: Role
    department_id: Optional[int] = None
