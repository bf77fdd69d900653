from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import Role


@dataclass(frozen=True)
class Member:
    """Workspace membership of an authenticated user.

    Note: member_id is what tasks are assigned to; user_id is what authors comments
    and owns attendance records.
    """

    member_id: str
    workspace_id: str
    user_id: str
    name: str
    role: Role
    joined_at: date

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
