from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Identity collaborator: resolves the caller's membership and role in a workspace."""

    def get_for_user(self, *, workspace_id: str, user_id: str) -> Optional[Member]:
        raise NotImplementedError

    def list_for_workspace(self, *, workspace_id: str) -> Sequence[Member]:
        raise NotImplementedError
