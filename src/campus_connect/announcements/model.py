from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Announcement:
    announcement_id: str
    title: str
    content: str
    priority: str
    created_by: str
    created_by_name: str
    created_at: str
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, row: dict) -> "Announcement":
        return cls(
            announcement_id=row["id"],
            title=row.get("title", ""),
            content=row.get("content", ""),
            priority=row.get("priority", "normal"),
            created_by=row.get("createdBy", ""),
            created_by_name=row.get("createdByName", ""),
            created_at=row.get("createdAt", ""),
            updated_at=row.get("updatedAt"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.announcement_id,
            "title": self.title,
            "content": self.content,
            "priority": self.priority,
            "createdBy": self.created_by,
            "createdByName": self.created_by_name,
            "createdAt": self.created_at,
        }
        if self.updated_at:
            out["updatedAt"] = self.updated_at
        return out
