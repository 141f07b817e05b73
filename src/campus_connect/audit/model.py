from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuditEntry:
    """Append-only record of a privileged mutation."""

    entry_id: str
    action: str
    actor_id: Optional[str]
    details: str
    timestamp: str
    actor_name: Optional[str] = None

    @classmethod
    def from_dict(cls, row: dict) -> "AuditEntry":
        return cls(
            entry_id=row["id"],
            action=row["action"],
            actor_id=row.get("userId"),
            details=row.get("details", ""),
            timestamp=row["timestamp"],
            actor_name=row.get("userName"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.entry_id,
            "action": self.action,
            "userId": self.actor_id,
            "details": self.details,
            "timestamp": self.timestamp,
        }
        if self.actor_name:
            out["userName"] = self.actor_name
        return out
