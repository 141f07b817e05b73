"""Role capabilities and the two authorization tiers.

Claim-trust checks the role carried by the bearer token. Live-trust re-reads
the user's stored role, because a role can change after the token was issued.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.repository import UserRepository
from ..users.tokens import TokenClaims


class Capability(str, Enum):
    MANAGE_EVENTS = "manage_events"
    MANAGE_SESSIONS = "manage_sessions"
    APPROVE_ATTENDANCE = "approve_attendance"
    REVIEW_ROLE_REQUESTS = "review_role_requests"
    READ_AUDIT_LOG = "read_audit_log"
    MANAGE_ANNOUNCEMENTS = "manage_announcements"
    MANAGE_USERS = "manage_users"
    CHECK_IN = "check_in"
    REQUEST_ROLE = "request_role"


_EVERYONE = frozenset({Capability.CHECK_IN, Capability.REQUEST_ROLE})
_ORGANIZER = _EVERYONE | {Capability.MANAGE_EVENTS, Capability.MANAGE_SESSIONS}

CAPABILITIES: Mapping[Role, frozenset] = {
    Role.STUDENT: _EVERYONE,
    Role.FACULTY: _ORGANIZER,
    Role.CORE_COMMITTEE: _ORGANIZER | {Capability.MANAGE_ANNOUNCEMENTS, Capability.MANAGE_USERS},
    Role.ADMIN: frozenset(Capability),
}


def role_can(role: Optional[Role], capability: Capability) -> bool:
    if role is None:
        return False
    return capability in CAPABILITIES.get(role, frozenset())


class AuthorizationGuard:
    def __init__(self, users: UserRepository):
        self._users = users

    def require(self, claims: TokenClaims, capability: Capability) -> None:
        """Claim-trust tier: the token's role must hold ``capability``."""
        if not role_can(claims.role, capability):
            raise AuthorizationError("Access denied")

    def require_live(self, claims: TokenClaims, capability: Capability) -> Role:
        """Live-trust tier: the stored role must hold ``capability``.

        Fails closed when the user record no longer exists.
        """
        user = self._users.get_by_id(claims.user_id)
        if not user or not role_can(user.role, capability):
            raise AuthorizationError("Access denied")
        return user.role
