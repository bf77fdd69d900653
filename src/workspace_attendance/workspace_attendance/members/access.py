from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import Unauthorized


def ensure_can_view(*, current_user_id: str, current_role: Role, target_user_id: str) -> None:
    """Self access is always allowed; anyone else's data needs the admin role."""

    if target_user_id == current_user_id:
        return
    if current_role != Role.ADMIN:
        raise Unauthorized("Only admins can view other users' attendance")
