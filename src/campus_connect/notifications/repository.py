from __future__ import annotations

from typing import Protocol, Sequence

from .model import Notification


class NotificationRepository(Protocol):
    def append(self, notification: Notification) -> None:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        raise NotImplementedError

    def mark_read(self, *, notification_id: str, user_id: str) -> bool:
        """Only the recipient may mark a notification as read."""

        raise NotImplementedError
