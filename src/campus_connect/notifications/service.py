from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..core.enums import NotificationType
from ..core.exceptions import NotFoundError
from .broker import NotificationBroker
from .model import XREF_FIELDS, Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Fan-out: durable copy first, then live delivery if the user is connected."""

    def __init__(self, notifications: NotificationRepository, broker: NotificationBroker):
        self._notifications = notifications
        self._broker = broker

    @property
    def broker(self) -> NotificationBroker:
        return self._broker

    def publish(
        self,
        user_id: str,
        type: NotificationType | str,
        title: str,
        message: str,
        **xref: Optional[str],
    ) -> Notification:
        unknown = set(xref) - set(XREF_FIELDS)
        if unknown:
            raise ValueError(f"Unknown cross-reference: {sorted(unknown)}")

        notification = Notification(
            notification_id=new_id(),
            user_id=user_id,
            type=type.value if isinstance(type, NotificationType) else str(type),
            title=title,
            message=message,
            created_at=now_iso(),
            read=False,
            xref={k: v for k, v in xref.items() if v},
        )
        self._notifications.append(notification)

        delivered = self._broker.publish(user_id, notification.to_dict())
        logger.debug("Notification %s for %s delivered live to %d connection(s)", notification.type, user_id, delivered)
        return notification

    def notify(
        self,
        user_id: str,
        type: NotificationType | str,
        title: str,
        message: str,
        **xref: Optional[str],
    ) -> Optional[Notification]:
        """``publish`` for callers whose state change is already committed.

        A failed write is logged and reported as None; it never undoes the caller's work.
        """
        try:
            return self.publish(user_id, type, title, message, **xref)
        except Exception:
            logger.exception("Failed to send %s notification to %s", getattr(type, "value", type), user_id)
            return None

    def list_for(self, user_id: str) -> Sequence[Notification]:
        return self._notifications.list_for_user(user_id)

    def mark_read(self, notification_id: str, user_id: str) -> None:
        if not self._notifications.mark_read(notification_id=notification_id, user_id=user_id):
            raise NotFoundError("Notification not found")
