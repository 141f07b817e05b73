from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..core.constants import PRACTICE_SESSIONS
from ..core.enums import SessionStatus
from ..storage.base import DocumentStore
from .model import PracticeSession
from .repository import PracticeSessionRepository


class JsonPracticeSessionRepository(PracticeSessionRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, session: PracticeSession) -> PracticeSession:
        with self._store.transaction(PRACTICE_SESSIONS) as rows:
            rows.append(session.to_dict())
        return session

    def get_by_id(self, session_id: str) -> Optional[PracticeSession]:
        for row in self._store.load(PRACTICE_SESSIONS):
            if row.get("id") == session_id:
                return PracticeSession.from_dict(row)
        return None

    def list_all(self) -> Sequence[PracticeSession]:
        return [PracticeSession.from_dict(r) for r in self._store.load(PRACTICE_SESSIONS)]

    def add_attendee(self, session_id: str, record: AttendanceRecord) -> Tuple[Optional[PracticeSession], bool]:
        with self._store.transaction(PRACTICE_SESSIONS) as rows:
            for row in rows:
                if row.get("id") != session_id:
                    continue
                attendance = row.setdefault("attendance", [])
                if any(a.get("id") == record.user_id for a in attendance):
                    return PracticeSession.from_dict(row), False
                attendance.append(record.to_dict())
                return PracticeSession.from_dict(row), True
        return None, False

    def set_status(self, session_id: str, status: SessionStatus, *, updated_at: str) -> Optional[PracticeSession]:
        with self._store.transaction(PRACTICE_SESSIONS) as rows:
            for row in rows:
                if row.get("id") == session_id:
                    row["status"] = status.value
                    row["updatedAt"] = updated_at
                    return PracticeSession.from_dict(row)
        return None
