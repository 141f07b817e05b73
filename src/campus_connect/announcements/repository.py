from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Announcement


class AnnouncementRepository(Protocol):
    def create(self, announcement: Announcement) -> Announcement:
        raise NotImplementedError

    def list_all(self) -> Sequence[Announcement]:
        """Newest first."""

        raise NotImplementedError

    def update_fields(self, announcement_id: str, changes: dict, *, updated_at: str) -> Optional[Announcement]:
        raise NotImplementedError

    def delete_by_id(self, announcement_id: str) -> Optional[Announcement]:
        raise NotImplementedError
