from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..core.enums import SessionStatus
from .model import PracticeSession


class PracticeSessionRepository(Protocol):
    def create(self, session: PracticeSession) -> PracticeSession:
        raise NotImplementedError

    def get_by_id(self, session_id: str) -> Optional[PracticeSession]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PracticeSession]:
        raise NotImplementedError

    def add_attendee(self, session_id: str, record: AttendanceRecord) -> Tuple[Optional[PracticeSession], bool]:
        """Same contract as EventRepository.add_attendee."""

        raise NotImplementedError

    def set_status(self, session_id: str, status: SessionStatus, *, updated_at: str) -> Optional[PracticeSession]:
        raise NotImplementedError
