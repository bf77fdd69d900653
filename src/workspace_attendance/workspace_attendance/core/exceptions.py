from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "authorization_error"


class Unauthorized(AuthorizationError):
    """Cross-user access without the admin role, or caller is not a workspace member."""

    code = "unauthorized"


class StoreUnavailable(DomainError):
    """A collaborator (record store, work-item store) failed; not a rule violation."""

    code = "store_unavailable"


class DuplicateEntry(DomainError):
    """A unique key rejected the write; another request stored the same row first."""

    code = "duplicate_entry"


class InvalidCoordinates(ValidationError):
    code = "invalid_coordinates"


class AlreadyCheckedIn(ValidationError):
    code = "already_checked_in"

    def __init__(self, message: str = "Already checked in today"):
        super().__init__(message)


class NoCheckInFound(ValidationError):
    code = "no_check_in_found"

    def __init__(self, message: str = "No check-in record found for today"):
        super().__init__(message)


class AlreadyCheckedOut(ValidationError):
    code = "already_checked_out"

    def __init__(self, message: str = "Already checked out today"):
        super().__init__(message)


class NotesLengthInvalid(ValidationError):
    code = "notes_length_invalid"


class PendingTaskComments(ValidationError):
    """Check-out blocked: in-progress work items without a comment today."""

    code = "pending_task_comments"

    def __init__(self, item_ids: Sequence[str]):
        self.item_ids = list(item_ids)
        super().__init__(
            f"Add a comment today on {len(self.item_ids)} in-progress task(s) before checking out"
        )
