from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import User

_TOKEN_SALT = "access-token"


@dataclass(frozen=True)
class TokenClaims:
    """What a bearer token carries. ``role`` is the role at issue time."""

    user_id: str
    email: str
    role: Role


class TokenService:
    """Signed, time-bounded bearer tokens."""

    def __init__(self, secret_key: str, *, max_age_days: int = DEFAULT_TOKEN_DAYS):
        self._serializer = URLSafeTimedSerializer(secret_key)
        self._max_age = int(max_age_days) * 24 * 60 * 60

    def issue(self, user: User) -> str:
        return self._serializer.dumps(
            {"id": user.user_id, "email": user.email, "role": user.role.value},
            salt=_TOKEN_SALT,
        )

    def validate(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise AuthenticationError("No token provided")
        try:
            data = self._serializer.loads(token, salt=_TOKEN_SALT, max_age=self._max_age)
        except SignatureExpired:
            raise AuthenticationError("Token expired")
        except BadSignature:
            raise AuthenticationError("Invalid token")

        try:
            return TokenClaims(user_id=str(data["id"]), email=str(data["email"]), role=Role(data["role"]))
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token")
