from __future__ import annotations

from ...core.constants import XP_PER_CLUB, XP_PER_EVENT, XP_PER_LEVEL, XP_PER_SESSION
from ..model import ActivityCounts, ScoreCard
from .base import ScoreCalculator


class StandardScoreCalculator(ScoreCalculator):
    """10 xp per event, 20 per club, 5 per session; a level every 50 xp."""

    def score(self, counts: ActivityCounts) -> ScoreCard:
        xp = (
            XP_PER_EVENT * int(counts.events_attended)
            + XP_PER_CLUB * int(counts.clubs_joined)
            + XP_PER_SESSION * int(counts.sessions_attended)
        )
        level = xp // XP_PER_LEVEL + 1
        return ScoreCard(xp=xp, level=level, next_level_threshold=level * XP_PER_LEVEL)
