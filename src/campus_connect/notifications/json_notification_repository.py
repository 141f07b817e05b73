from __future__ import annotations

from typing import Sequence

from ..core.constants import NOTIFICATIONS
from ..storage.base import DocumentStore
from .model import Notification
from .repository import NotificationRepository


class JsonNotificationRepository(NotificationRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def append(self, notification: Notification) -> None:
        with self._store.transaction(NOTIFICATIONS) as rows:
            rows.append(notification.to_dict())

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        return [Notification.from_dict(r) for r in self._store.load(NOTIFICATIONS) if r.get("userId") == user_id]

    def mark_read(self, *, notification_id: str, user_id: str) -> bool:
        with self._store.transaction(NOTIFICATIONS) as rows:
            for row in rows:
                if row.get("id") == notification_id and row.get("userId") == user_id:
                    row["read"] = True
                    return True
        return False
