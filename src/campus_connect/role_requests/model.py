from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import RequestStatus, Role


@dataclass(frozen=True)
class RoleRequest:
    request_id: str
    user_id: str
    user_name: str
    current_role: Role
    requested_role: Role
    reason: str
    status: RequestStatus
    created_at: str
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[str] = None

    @classmethod
    def from_dict(cls, row: dict) -> "RoleRequest":
        return cls(
            request_id=row["id"],
            user_id=row["userId"],
            user_name=row.get("userName", ""),
            current_role=Role(row["currentRole"]),
            requested_role=Role(row["requestedRole"]),
            reason=row.get("reason", ""),
            status=RequestStatus(row.get("status", RequestStatus.PENDING.value)),
            created_at=row.get("createdAt", ""),
            reviewed_by=row.get("reviewedBy"),
            reviewed_at=row.get("reviewedAt"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.request_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "currentRole": self.current_role.value,
            "requestedRole": self.requested_role.value,
            "reason": self.reason,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.reviewed_by:
            out["reviewedBy"] = self.reviewed_by
            out["reviewedAt"] = self.reviewed_at
        return out
