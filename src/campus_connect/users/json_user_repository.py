from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import USERS
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..storage.base import DocumentStore
from .model import PROFILE_FIELDS, User
from .repository import UserRepository


class JsonUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get_by_id(self, user_id: str) -> Optional[User]:
        for row in self._store.load(USERS):
            if row.get("id") == user_id:
                return User.from_dict(row)
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        for row in self._store.load(USERS):
            if str(row.get("email", "")).lower() == email:
                return User.from_dict(row)
        return None

    def list_all(self) -> Sequence[User]:
        return [User.from_dict(r) for r in self._store.load(USERS)]

    def list_by_role(self, role: Role) -> Sequence[User]:
        return [u for u in self.list_all() if u.role == role]

    def create_user(self, user: User) -> User:
        with self._store.transaction(USERS) as rows:
            if any(str(r.get("email", "")).lower() == user.email.lower() for r in rows):
                raise ConflictError("User already exists")
            rows.append(user.to_dict())
        return user

    def update_fields(self, user_id: str, changes: dict, *, updated_at: str) -> Optional[User]:
        with self._store.transaction(USERS) as rows:
            for row in rows:
                if row.get("id") != user_id:
                    continue
                for attr, value in changes.items():
                    if attr == "role":
                        row["role"] = Role(value).value
                    elif attr in PROFILE_FIELDS:
                        row[PROFILE_FIELDS[attr]] = value
                row["updatedAt"] = updated_at
                return User.from_dict(row)
        return None

    def delete_by_id(self, user_id: str) -> bool:
        with self._store.transaction(USERS) as rows:
            before = len(rows)
            rows[:] = [r for r in rows if r.get("id") != user_id]
            return len(rows) < before
