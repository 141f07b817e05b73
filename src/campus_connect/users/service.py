from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..audit.service import AuditLog
from ..auth.guard import AuthorizationGuard, Capability
from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..common.validators import require_email, require_min_length, require_non_empty, require_text, truthy_changes
from ..core.constants import DEFAULT_VERIFIED_DOMAINS
from ..core.enums import AuditAction, Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import PROFILE_FIELDS, User
from .repository import UserRepository
from .tokens import TokenClaims, TokenService


@dataclass(frozen=True)
class AuthResult:
    """Returned by register/login: the bearer token and the public user view."""

    token: str
    user: dict


def is_verified_domain(email: str, allowed_domains: Iterable[str]) -> bool:
    """Suffix match on whole labels: ``cs.college.edu`` matches ``edu``, ``education.com`` does not."""
    domain = email.partition("@")[2].lower()
    return bool(domain) and any(domain == d or domain.endswith("." + d) for d in allowed_domains)


class AuthService:
    """Use case: register and log in."""

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        audit: AuditLog,
        *,
        verified_domains: Iterable[str] = DEFAULT_VERIFIED_DOMAINS,
    ):
        self._users = users
        self._tokens = tokens
        self._audit = audit
        self._verified_domains = tuple(verified_domains)

    def register(self, profile: dict) -> AuthResult:
        email = require_email(profile.get("email", ""))
        password = require_min_length(profile.get("password"), "Password", 6)
        name = require_non_empty(profile.get("name", ""), "Name")

        try:
            role = Role(profile.get("role") or Role.STUDENT.value)
        except (TypeError, ValueError):
            raise ValidationError("Unknown role")
        if role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be self-registered")

        user = User(
            user_id=new_id(),
            email=email,
            password_hash=generate_password_hash(password),
            name=name,
            role=role,
            verified=is_verified_domain(email, self._verified_domains),
            created_at=now_iso(),
            profile={attr: profile.get(attr) or "" for attr in PROFILE_FIELDS if attr != "name"},
        )
        self._users.create_user(user)

        self._audit.record(
            AuditAction.USER_REGISTERED,
            user.user_id,
            f"New {role.value} account created",
            actor_name=user.name,
        )
        return AuthResult(token=self._tokens.issue(user), user=user.public())

    def login(self, email: str, password: str) -> AuthResult:
        email = require_text(email, "Email")
        password = require_text(password, "Password")

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return AuthResult(token=self._tokens.issue(user), user=user.public())

    def validate_token(self, token: Optional[str]) -> TokenClaims:
        return self._tokens.validate(token)


class UserService:
    """Use case: profile updates and user administration."""

    def __init__(self, users: UserRepository, guard: AuthorizationGuard, audit: AuditLog):
        self._users = users
        self._guard = guard
        self._audit = audit

    def current_user(self, user_id: str) -> dict:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user.public()

    def update_profile(self, user_id: str, patch: dict) -> dict:
        """Partial update: only non-empty supplied fields overwrite stored values."""
        changes = truthy_changes(patch, PROFILE_FIELDS)
        user = self._users.update_fields(user_id, changes, updated_at=now_iso())
        if not user:
            raise NotFoundError("User not found")
        return user.public()

    def list_users(self, claims: TokenClaims) -> Sequence[dict]:
        self._guard.require_live(claims, Capability.MANAGE_USERS)
        return [
            {
                "id": u.user_id,
                "email": u.email,
                "name": u.name,
                "role": u.role.value,
                "department": u.profile.get("department", ""),
                "position": u.profile.get("position", ""),
                "createdAt": u.created_at,
            }
            for u in self._users.list_all()
        ]

    def admin_update_user(self, claims: TokenClaims, user_id: str, patch: dict) -> dict:
        self._guard.require_live(claims, Capability.MANAGE_USERS)

        changes = truthy_changes(patch, list(PROFILE_FIELDS) + ["role"])
        if "role" in changes:
            try:
                changes["role"] = Role(changes["role"])
            except (TypeError, ValueError):
                raise ValidationError("Unknown role")

        user = self._users.update_fields(user_id, changes, updated_at=now_iso())
        if not user:
            raise NotFoundError("User not found")

        self._audit.record(AuditAction.USER_UPDATED, claims.user_id, f"Updated user {user.email}")
        return user.public()

    def delete_user(self, claims: TokenClaims, user_id: str) -> None:
        self._guard.require_live(claims, Capability.MANAGE_USERS)

        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User not found")

        self._audit.record(AuditAction.USER_DELETED, claims.user_id, f"Deleted user {user.email}")
