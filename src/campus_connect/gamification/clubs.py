from __future__ import annotations

from typing import Protocol

from ..core.constants import CLUBS
from ..storage.base import DocumentStore


class ClubMembershipSource(Protocol):
    """Read-only view of club membership; clubs are managed elsewhere."""

    def count_memberships(self, user_id: str) -> int:
        raise NotImplementedError


class JsonClubMembershipSource(ClubMembershipSource):
    def __init__(self, store: DocumentStore):
        self._store = store

    def count_memberships(self, user_id: str) -> int:
        return sum(
            1
            for club in self._store.load(CLUBS)
            if any(m.get("id") == user_id for m in club.get("members", []))
        )
