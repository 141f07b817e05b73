from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import AttendanceRecord


class CheckInStrategy(ABC):
    """Strategy Pattern: decide the initial state of a new attendance record."""

    xp_reward: int = 0

    @abstractmethod
    def new_record(self, *, user_id: str, name: str, timestamp: str, roll_number: Optional[str] = None) -> AttendanceRecord:
        raise NotImplementedError
