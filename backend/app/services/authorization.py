"""
Hauge API — Ownership Check
============================

A user may only mutate resources they own. Reads are unauthenticated and
never pass through here.
"""

from dataclasses import dataclass

from app.exceptions import ForbiddenError

OWNERSHIP_MESSAGE = "Users can only update their own account"


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved from a verified bearer token, threaded into handlers."""

    user_id: int


def is_owner(auth: AuthContext, owner_id: int) -> bool:
    return auth.user_id == owner_id


def ensure_owner(auth: AuthContext, owner_id: int) -> None:
    """Raises ForbiddenError (403) unless the authenticated user owns the resource."""
    if not is_owner(auth, owner_id):
        raise ForbiddenError(
            message=OWNERSHIP_MESSAGE,
            context={"user_id": auth.user_id, "owner_id": owner_id},
        )
