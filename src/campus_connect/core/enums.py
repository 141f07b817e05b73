from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    STUDENT = "student"
    FACULTY = "faculty"
    CORE_COMMITTEE = "core-committee"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Per-attendee state stored on an event or practice session."""

    PENDING = "pending"
    APPROVED = "approved"
    RECORDED = "recorded"


class SessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RequestStatus(str, Enum):
    """Role request review flow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    NEW_EVENT = "new_event"
    ATTENDANCE_MARKED = "attendance_marked"
    ATTENDANCE_APPROVED = "attendance_approved"
    PRACTICE_SCHEDULED = "practice_scheduled"
    PRACTICE_ATTENDANCE = "practice_attendance"
    PRACTICE_REPORT = "practice_report"
    ANNOUNCEMENT = "announcement"
    ROLE_REQUEST = "role_request"
    ROLE_APPROVED = "role_approved"


class AuditAction(str, Enum):
    USER_REGISTERED = "USER_REGISTERED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"
    EVENT_DELETED = "EVENT_DELETED"
    ATTENDANCE_APPROVED = "ATTENDANCE_APPROVED"
    ANNOUNCEMENT_DELETED = "ANNOUNCEMENT_DELETED"
    ROLE_REQUEST_REVIEWED = "ROLE_REQUEST_REVIEWED"
