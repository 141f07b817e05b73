from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..core.constants import EVENTS
from ..core.enums import AttendanceStatus
from ..storage.base import DocumentStore
from .model import EVENT_FIELDS, Event
from .repository import EventRepository


class JsonEventRepository(EventRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, event: Event) -> Event:
        with self._store.transaction(EVENTS) as rows:
            rows.append(event.to_dict())
        return event

    def get_by_id(self, event_id: str) -> Optional[Event]:
        for row in self._store.load(EVENTS):
            if row.get("id") == event_id:
                return Event.from_dict(row)
        return None

    def list_all(self) -> Sequence[Event]:
        return [Event.from_dict(r) for r in self._store.load(EVENTS)]

    def update_details(self, event_id: str, changes: dict, *, updated_at: str) -> Optional[Event]:
        with self._store.transaction(EVENTS) as rows:
            for row in rows:
                if row.get("id") == event_id:
                    row.update({k: v for k, v in changes.items() if k in EVENT_FIELDS})
                    row["updatedAt"] = updated_at
                    return Event.from_dict(row)
        return None

    def delete_by_id(self, event_id: str) -> Optional[Event]:
        with self._store.transaction(EVENTS) as rows:
            for i, row in enumerate(rows):
                if row.get("id") == event_id:
                    del rows[i]
                    return Event.from_dict(row)
        return None

    def add_attendee(self, event_id: str, record: AttendanceRecord) -> Tuple[Optional[Event], bool]:
        with self._store.transaction(EVENTS) as rows:
            for row in rows:
                if row.get("id") != event_id:
                    continue
                attendees = row.setdefault("attendees", [])
                if any(a.get("id") == record.user_id for a in attendees):
                    return Event.from_dict(row), False
                attendees.append(record.to_dict())
                return Event.from_dict(row), True
        return None, False

    def set_attendee_status(
        self,
        event_id: str,
        user_id: str,
        status: AttendanceStatus,
    ) -> Tuple[Optional[Event], Optional[AttendanceStatus]]:
        with self._store.transaction(EVENTS) as rows:
            for row in rows:
                if row.get("id") != event_id:
                    continue
                for attendee in row.get("attendees", []):
                    if attendee.get("id") == user_id:
                        previous = AttendanceStatus(attendee.get("status") or AttendanceStatus.PENDING.value)
                        attendee["status"] = status.value
                        return Event.from_dict(row), previous
                return Event.from_dict(row), None
        return None, None
