from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import SessionStatus

SESSION_FIELDS = ("title", "date", "time", "venue", "description")


@dataclass(frozen=True)
class PracticeSession:
    """Domain entity: practice session bound to a class teacher.

    Students see a session when their ``class_teacher`` equals ``teacher_name``.
    """

    session_id: str
    created_by: str
    created_at: str
    teacher_name: str
    status: SessionStatus = SessionStatus.SCHEDULED
    manual_code: str = ""
    qr_code: str = ""
    details: dict = field(default_factory=dict)
    attendance: tuple = ()
    updated_at: Optional[str] = None

    def attendee(self, user_id: str) -> Optional[AttendanceRecord]:
        for record in self.attendance:
            if record.user_id == user_id:
                return record
        return None

    @classmethod
    def from_dict(cls, row: dict) -> "PracticeSession":
        return cls(
            session_id=row["id"],
            created_by=row.get("createdBy", ""),
            created_at=row.get("createdAt", ""),
            teacher_name=row.get("teacherName", ""),
            status=SessionStatus(row.get("status") or SessionStatus.SCHEDULED.value),
            manual_code=row.get("manualCode", ""),
            qr_code=row.get("qrCode", ""),
            details={k: row[k] for k in SESSION_FIELDS if k in row},
            attendance=tuple(AttendanceRecord.from_dict(a) for a in row.get("attendance", [])),
            updated_at=row.get("updatedAt"),
        )

    def to_dict(self) -> dict:
        out = dict(self.details)
        out.update(
            {
                "id": self.session_id,
                "teacherName": self.teacher_name,
                "createdBy": self.created_by,
                "createdAt": self.created_at,
                "manualCode": self.manual_code,
                "qrCode": self.qr_code,
                "attendance": [a.to_dict() for a in self.attendance],
                "status": self.status.value,
            }
        )
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out
