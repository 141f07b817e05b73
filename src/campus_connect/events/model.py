from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceRecord

# Descriptive fields a client may set on create/update.
EVENT_FIELDS = ("title", "description", "date", "time", "venue", "category", "image")


@dataclass(frozen=True)
class Event:
    """Domain entity: Event.

    ``qr_code`` (PNG data URL) and ``manual_code`` (plain text) are rendered
    once when the event is created and never regenerated.
    """

    event_id: str
    created_by: str
    created_at: str
    qr_code: str
    manual_code: str
    status: str = "pending"
    details: dict = field(default_factory=dict)
    attendees: tuple = ()
    updated_at: Optional[str] = None

    @property
    def title(self) -> str:
        return self.details.get("title", "")

    def attendee(self, user_id: str) -> Optional[AttendanceRecord]:
        for record in self.attendees:
            if record.user_id == user_id:
                return record
        return None

    @classmethod
    def from_dict(cls, row: dict) -> "Event":
        return cls(
            event_id=row["id"],
            created_by=row.get("createdBy", ""),
            created_at=row.get("createdAt", ""),
            qr_code=row.get("qrCode", ""),
            manual_code=row.get("manualCode", ""),
            status=row.get("status", "pending"),
            details={k: row[k] for k in EVENT_FIELDS if k in row},
            attendees=tuple(AttendanceRecord.from_dict(a) for a in row.get("attendees", [])),
            updated_at=row.get("updatedAt"),
        )

    def to_dict(self) -> dict:
        out = dict(self.details)
        out.update(
            {
                "id": self.event_id,
                "qrCode": self.qr_code,
                "manualCode": self.manual_code,
                "createdBy": self.created_by,
                "createdAt": self.created_at,
                "attendees": [a.to_dict() for a in self.attendees],
                "status": self.status,
            }
        )
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out
