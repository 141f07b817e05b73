from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role

# Python attribute -> stored JSON key.
PROFILE_FIELDS = {
    "name": "name",
    "roll_number": "rollNumber",
    "department": "department",
    "year": "year",
    "phone": "phone",
    "designation": "designation",
    "residence": "residence",
    "position": "position",
    "section": "section",
    "course": "course",
    "class_teacher": "classTeacher",
    "class_coordinator": "classCoordinator",
    "hod": "hod",
}


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object, no storage access.
    """

    user_id: str
    email: str
    password_hash: str
    name: str
    role: Role
    verified: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    profile: dict = field(default_factory=dict)

    @property
    def class_teacher(self) -> str:
        return self.profile.get("class_teacher", "")

    @classmethod
    def from_dict(cls, row: dict) -> "User":
        profile = {attr: row.get(key, "") for attr, key in PROFILE_FIELDS.items() if attr != "name"}
        return cls(
            user_id=row["id"],
            email=row["email"],
            password_hash=row["password"],
            name=row.get("name", ""),
            role=Role(row.get("role", Role.STUDENT.value)),
            verified=bool(row.get("verified", False)),
            created_at=row.get("createdAt"),
            updated_at=row.get("updatedAt"),
            profile=profile,
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.user_id,
            "email": self.email,
            "password": self.password_hash,
            "name": self.name,
            "role": self.role.value,
            "verified": self.verified,
            "createdAt": self.created_at,
        }
        for attr, key in PROFILE_FIELDS.items():
            if attr != "name":
                out[key] = self.profile.get(attr, "")
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out

    def public(self) -> dict:
        """Stored representation without the password hash."""
        out = self.to_dict()
        out.pop("password", None)
        return out


def normalize_payload(payload: dict) -> dict:
    """Accept both stored camelCase keys and attribute names in request bodies."""
    out = dict(payload or {})
    for attr, key in PROFILE_FIELDS.items():
        if attr not in out and key in out:
            out[attr] = out[key]
    return out
