from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ANNOUNCEMENTS
from ..storage.base import DocumentStore
from .model import Announcement
from .repository import AnnouncementRepository


class JsonAnnouncementRepository(AnnouncementRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, announcement: Announcement) -> Announcement:
        with self._store.transaction(ANNOUNCEMENTS) as rows:
            rows.append(announcement.to_dict())
        return announcement

    def list_all(self) -> Sequence[Announcement]:
        rows = self._store.load(ANNOUNCEMENTS)
        rows.sort(key=lambda r: r.get("createdAt", ""), reverse=True)
        return [Announcement.from_dict(r) for r in rows]

    def update_fields(self, announcement_id: str, changes: dict, *, updated_at: str) -> Optional[Announcement]:
        with self._store.transaction(ANNOUNCEMENTS) as rows:
            for row in rows:
                if row.get("id") == announcement_id:
                    row.update(changes)
                    row["updatedAt"] = updated_at
                    return Announcement.from_dict(row)
        return None

    def delete_by_id(self, announcement_id: str) -> Optional[Announcement]:
        with self._store.transaction(ANNOUNCEMENTS) as rows:
            for i, row in enumerate(rows):
                if row.get("id") == announcement_id:
                    del rows[i]
                    return Announcement.from_dict(row)
        return None
