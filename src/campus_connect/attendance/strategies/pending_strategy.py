from __future__ import annotations

from typing import Optional

from ...core.constants import XP_PER_EVENT
from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import CheckInStrategy


class PendingApprovalStrategy(CheckInStrategy):
    """Event check-in: the record waits for admin approval."""

    xp_reward = XP_PER_EVENT

    def new_record(self, *, user_id: str, name: str, timestamp: str, roll_number: Optional[str] = None) -> AttendanceRecord:
        return AttendanceRecord(user_id=user_id, name=name, timestamp=timestamp, status=AttendanceStatus.PENDING)
