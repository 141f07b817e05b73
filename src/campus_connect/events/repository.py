from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from .model import Event


class EventRepository(Protocol):
    def create(self, event: Event) -> Event:
        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Event]:
        raise NotImplementedError

    def update_details(self, event_id: str, changes: dict, *, updated_at: str) -> Optional[Event]:
        raise NotImplementedError

    def delete_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def add_attendee(self, event_id: str, record: AttendanceRecord) -> Tuple[Optional[Event], bool]:
        """Append ``record`` unless the user already has one.

        Returns (event, created). The event is None when it does not exist.
        Check and append happen in one store transaction.
        """

        raise NotImplementedError

    def set_attendee_status(
        self,
        event_id: str,
        user_id: str,
        status: AttendanceStatus,
    ) -> Tuple[Optional[Event], Optional[AttendanceStatus]]:
        """Returns (event, previous status). Previous status is None if no record."""

        raise NotImplementedError
