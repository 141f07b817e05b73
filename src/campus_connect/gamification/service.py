from __future__ import annotations

from typing import Optional

from ..events.repository import EventRepository
from ..practice.repository import PracticeSessionRepository
from .calculator.base import ScoreCalculator
from .calculator.standard_calculator import StandardScoreCalculator
from .clubs import ClubMembershipSource
from .model import ActivityCounts, ScoreCard


class ScoreService:
    """Recomputes a user's score from current store contents on every call."""

    def __init__(
        self,
        events: EventRepository,
        sessions: PracticeSessionRepository,
        clubs: ClubMembershipSource,
        *,
        calculator: Optional[ScoreCalculator] = None,
    ):
        self._events = events
        self._sessions = sessions
        self._clubs = clubs
        self._calculator = calculator or StandardScoreCalculator()

    def counts_for(self, user_id: str) -> ActivityCounts:
        return ActivityCounts(
            events_attended=sum(1 for e in self._events.list_all() if e.attendee(user_id)),
            clubs_joined=self._clubs.count_memberships(user_id),
            sessions_attended=sum(1 for s in self._sessions.list_all() if s.attendee(user_id)),
        )

    def compute_score(self, user_id: str) -> ScoreCard:
        return self._calculator.score(self.counts_for(user_id))
