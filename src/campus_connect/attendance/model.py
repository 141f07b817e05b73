from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendee entry embedded in an event or practice session."""

    user_id: str
    name: str
    timestamp: str
    status: AttendanceStatus
    roll_number: Optional[str] = None

    @classmethod
    def from_dict(cls, row: dict) -> "AttendanceRecord":
        return cls(
            user_id=row["id"],
            name=row.get("name", ""),
            timestamp=row.get("timestamp", ""),
            status=AttendanceStatus(row.get("status") or AttendanceStatus.RECORDED.value),
            roll_number=row.get("rollNumber"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.user_id,
            "name": self.name,
            "timestamp": self.timestamp,
            "status": self.status.value,
        }
        if self.roll_number is not None:
            out["rollNumber"] = self.roll_number
        return out


@dataclass(frozen=True)
class CheckInResult:
    """Outcome of a check-in. ``created`` is False for a repeated check-in."""

    resource_id: str
    record: AttendanceRecord
    created: bool
    xp_gained: int = 0


@dataclass(frozen=True)
class AttendanceReport:
    """Read-model for the event/session attendance report."""

    resource_id: str
    title: str
    total: int
    approved: int
    pending: int
    attendees: list
    generated_at: str
    status: Optional[str] = None
