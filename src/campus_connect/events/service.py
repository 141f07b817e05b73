from __future__ import annotations

from typing import Sequence

from ..attendance.codes import VerificationCodeScheme
from ..audit.service import AuditLog
from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import AuditAction, NotificationType, Role
from ..core.exceptions import NotFoundError
from ..notifications.service import NotificationService
from ..users.repository import UserRepository
from .model import EVENT_FIELDS, Event
from .repository import EventRepository


class EventService:
    """Use case: organizers manage events."""

    def __init__(
        self,
        events: EventRepository,
        users: UserRepository,
        notifications: NotificationService,
        audit: AuditLog,
        codes: VerificationCodeScheme,
    ):
        self._events = events
        self._users = users
        self._notifications = notifications
        self._audit = audit
        self._codes = codes

    def create(self, *, creator_id: str, fields: dict) -> Event:
        details = {k: fields[k] for k in EVENT_FIELDS if fields.get(k) is not None}
        details["title"] = require_non_empty(details.get("title", ""), "Title")

        event_id = new_id()
        code = self._codes.issue(event_id)
        event = self._events.create(
            Event(
                event_id=event_id,
                created_by=creator_id,
                created_at=now_iso(),
                qr_code=code.image_data_url,
                manual_code=code.text,
                details=details,
            )
        )

        for student in self._users.list_by_role(Role.STUDENT):
            self._notifications.notify(
                student.user_id,
                NotificationType.NEW_EVENT,
                "New Event Created",
                f"{event.title} has been scheduled!",
                event_id=event.event_id,
            )
        return event

    def list_all(self) -> Sequence[Event]:
        return self._events.list_all()

    def get(self, event_id: str) -> Event:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    def update(self, event_id: str, patch: dict) -> Event:
        """Descriptive fields only; id, code and attendees cannot be overwritten."""
        changes = {k: patch[k] for k in EVENT_FIELDS if k in patch}
        event = self._events.update_details(event_id, changes, updated_at=now_iso())
        if not event:
            raise NotFoundError("Event not found")
        return event

    def delete(self, event_id: str, *, actor_id: str) -> None:
        event = self._events.delete_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        self._audit.record(AuditAction.EVENT_DELETED, actor_id, f"Deleted event: {event.title}")

    def get_code(self, event_id: str) -> dict:
        event = self.get(event_id)
        return {"code": event.manual_code, "eventId": event.event_id, "eventTitle": event.title}

    def code_png(self, event_id: str) -> bytes:
        return self._codes.render_png(self.get(event_id).manual_code)
