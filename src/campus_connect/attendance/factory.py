from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import CheckInStrategy
from .strategies.pending_strategy import PendingApprovalStrategy
from .strategies.recorded_strategy import RecordedStrategy

EVENT = "event"
PRACTICE_SESSION = "practice_session"


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: choose the check-in strategy for a resource kind."""

    def for_resource(self, kind: str) -> CheckInStrategy:
        if kind == EVENT:
            return PendingApprovalStrategy()
        if kind == PRACTICE_SESSION:
            return RecordedStrategy()
        raise ValueError(f"Unknown resource kind: {kind!r}")
