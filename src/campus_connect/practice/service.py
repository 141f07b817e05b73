from __future__ import annotations

from ..attendance.codes import VerificationCodeScheme
from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import NotificationType, Role
from ..notifications.service import NotificationService
from ..users.repository import UserRepository
from .model import SESSION_FIELDS, PracticeSession
from .repository import PracticeSessionRepository


class PracticeSessionService:
    """Use case: schedule practice sessions for a class teacher's students."""

    def __init__(
        self,
        sessions: PracticeSessionRepository,
        users: UserRepository,
        notifications: NotificationService,
        codes: VerificationCodeScheme,
    ):
        self._sessions = sessions
        self._users = users
        self._notifications = notifications
        self._codes = codes

    def create(self, *, creator_id: str, fields: dict) -> PracticeSession:
        teacher_name = require_non_empty(fields.get("teacherName") or fields.get("teacher_name") or "", "Teacher name")

        session_id = new_id()
        code = self._codes.issue(session_id)
        session = self._sessions.create(
            PracticeSession(
                session_id=session_id,
                created_by=creator_id,
                created_at=now_iso(),
                teacher_name=teacher_name,
                manual_code=code.text,
                qr_code=code.image_data_url,
                details={k: fields[k] for k in SESSION_FIELDS if fields.get(k) is not None},
            )
        )

        for student in self._users.list_by_role(Role.STUDENT):
            if student.class_teacher != teacher_name:
                continue
            self._notifications.notify(
                student.user_id,
                NotificationType.PRACTICE_SCHEDULED,
                "Practice Session Scheduled",
                f"Practice session on {session.details.get('date', '')} at {session.details.get('time', '')}",
                session_id=session.session_id,
            )
        return session
