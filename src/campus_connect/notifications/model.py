from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Cross-reference attribute -> stored JSON key.
XREF_FIELDS = {
    "event_id": "eventId",
    "session_id": "sessionId",
    "announcement_id": "announcementId",
    "request_id": "requestId",
}


@dataclass(frozen=True)
class Notification:
    notification_id: str
    user_id: str
    type: str
    title: str
    message: str
    created_at: str
    read: bool = False
    xref: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, row: dict) -> "Notification":
        return cls(
            notification_id=row["id"],
            user_id=row["userId"],
            type=row.get("type", ""),
            title=row.get("title", ""),
            message=row.get("message", ""),
            created_at=row.get("createdAt", ""),
            read=bool(row.get("read", False)),
            xref={attr: row[key] for attr, key in XREF_FIELDS.items() if row.get(key)},
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.notification_id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "userId": self.user_id,
            "createdAt": self.created_at,
            "read": self.read,
        }
        for attr, value in self.xref.items():
            out[XREF_FIELDS[attr]] = value
        return out
