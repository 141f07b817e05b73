from __future__ import annotations

from typing import Sequence

from ..audit.service import AuditLog
from ..common.datetime_utils import now_iso
from ..core.enums import AttendanceStatus, AuditAction, NotificationType, Role, SessionStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..events.repository import EventRepository
from ..notifications.service import NotificationService
from ..practice.model import PracticeSession
from ..practice.repository import PracticeSessionRepository
from ..users.repository import UserRepository
from ..users.tokens import TokenClaims
from .codes import VerificationCodeScheme
from .factory import EVENT, PRACTICE_SESSION, CheckInStrategyFactory
from .model import AttendanceReport, CheckInResult



class AttendanceService:
    """Attendance lifecycle for events and practice sessions.

    Per (resource, user): absent -> pending -> approved for events, and
    absent -> recorded for practice sessions. A repeated check-in is a no-op.
    """

    def __init__(
        self,
        events: EventRepository,
        sessions: PracticeSessionRepository,
        users: UserRepository,
        notifications: NotificationService,
        audit: AuditLog,
        *,
        codes: VerificationCodeScheme | None = None,
        strategy_factory: CheckInStrategyFactory | None = None,
    ):
        self._events = events
        self._sessions = sessions
        self._users = users
        self._notifications = notifications
        self._audit = audit
        self._codes = codes or VerificationCodeScheme()
        self._factory = strategy_factory or CheckInStrategyFactory()

    def check_in_event(self, event_id: str, user_id: str) -> CheckInResult:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        strategy = self._factory.for_resource(EVENT)
        record = strategy.new_record(user_id=user_id, name=user.name or user.email, timestamp=now_iso())

        event, created = self._events.add_attendee(event_id, record)
        if event is None:
            raise NotFoundError("Event not found")
        if not created:
            return CheckInResult(resource_id=event_id, record=event.attendee(user_id), created=False)

        if self._users.get_by_id(event.created_by):
            self._notifications.notify(
                event.created_by,
                NotificationType.ATTENDANCE_MARKED,
                "New Attendance",
                f"{record.name} marked attendance for {event.title}",
                event_id=event.event_id,
            )
        return CheckInResult(resource_id=event_id, record=record, created=True, xp_gained=strategy.xp_reward)

    def check_in_session(self, session_id: str, user_id: str) -> CheckInResult:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        strategy = self._factory.for_resource(PRACTICE_SESSION)
        record = strategy.new_record(
            user_id=user_id,
            name=user.name or user.email,
            timestamp=now_iso(),
            roll_number=user.profile.get("roll_number", ""),
        )

        session, created = self._sessions.add_attendee(session_id, record)
        if session is None:
            raise NotFoundError("Session not found")
        if not created:
            return CheckInResult(resource_id=session_id, record=session.attendee(user_id), created=False)

        if self._users.get_by_id(session.created_by):
            self._notifications.notify(
                session.created_by,
                NotificationType.PRACTICE_ATTENDANCE,
                "Student Marked Attendance",
                f"{record.name} marked attendance for practice session",
                session_id=session.session_id,
            )
        return CheckInResult(resource_id=session_id, record=record, created=True, xp_gained=strategy.xp_reward)

    def redeem(self, code_text: str, user_id: str) -> CheckInResult:
        """Check in with a verification code; the code names an event or a session."""
        resource_id = self._codes.parse(code_text)
        if self._events.get_by_id(resource_id):
            return self.check_in_event(resource_id, user_id)
        if self._sessions.get_by_id(resource_id):
            return self.check_in_session(resource_id, user_id)
        raise NotFoundError("Event not found")

    def approve(self, event_id: str, user_id: str, *, approved_by: str | None = None) -> CheckInResult:
        event, previous = self._events.set_attendee_status(event_id, user_id, AttendanceStatus.APPROVED)
        if event is None:
            raise NotFoundError("Event not found")
        if previous is None:
            raise NotFoundError("Attendee not found")

        record = event.attendee(user_id)
        if previous == AttendanceStatus.APPROVED:
            return CheckInResult(resource_id=event_id, record=record, created=False)

        self._notifications.notify(
            user_id,
            NotificationType.ATTENDANCE_APPROVED,
            "Attendance Approved",
            f"Your attendance for {event.title} has been approved!",
            event_id=event.event_id,
        )
        self._audit.record(
            AuditAction.ATTENDANCE_APPROVED,
            approved_by,
            f"Approved {record.name} for {event.title}",
        )
        return CheckInResult(resource_id=event_id, record=record, created=False)

    def set_session_status(self, session_id: str, status: str) -> PracticeSession:
        try:
            new_status = SessionStatus(status)
        except (TypeError, ValueError):
            raise ValidationError("Unknown session status")

        session = self._sessions.set_status(session_id, new_status, updated_at=now_iso())
        if session is None:
            raise NotFoundError("Session not found")

        if new_status == SessionStatus.COMPLETED:
            if self._users.get_by_id(session.created_by):
                self._notifications.notify(
                    session.created_by,
                    NotificationType.PRACTICE_REPORT,
                    "Practice Session Completed",
                    f"{len(session.attendance)} students attended the practice session",
                    session_id=session.session_id,
                )
        return session

    def event_report(self, event_id: str) -> AttendanceReport:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return AttendanceReport(
            resource_id=event.event_id,
            title=event.title,
            total=len(event.attendees),
            approved=sum(1 for a in event.attendees if a.status == AttendanceStatus.APPROVED),
            pending=sum(1 for a in event.attendees if a.status == AttendanceStatus.PENDING),
            attendees=[a.to_dict() for a in event.attendees],
            generated_at=now_iso(),
            status=event.status,
        )

    def session_report(self, session_id: str) -> dict:
        session = self._sessions.get_by_id(session_id)
        if not session:
            raise NotFoundError("Session not found")
        return {
            "sessionDate": session.details.get("date"),
            "sessionTime": session.details.get("time"),
            "totalAttendance": len(session.attendance),
            "attendance": [a.to_dict() for a in session.attendance],
            "status": session.status.value,
            "generatedAt": now_iso(),
        }

    def list_sessions_for(self, claims: TokenClaims) -> Sequence[PracticeSession]:
        """Students: their class teacher's sessions. Faculty: their own. Others: all."""
        sessions = self._sessions.list_all()
        if claims.role == Role.STUDENT:
            user = self._users.get_by_id(claims.user_id)
            teacher = user.class_teacher if user else ""
            if not teacher:
                return []
            return [s for s in sessions if s.teacher_name == teacher]
        if claims.role == Role.FACULTY:
            return [s for s in sessions if s.created_by == claims.user_id]
        return list(sessions)
