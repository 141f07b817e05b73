from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityCounts:
    events_attended: int = 0
    clubs_joined: int = 0
    sessions_attended: int = 0


@dataclass(frozen=True)
class ScoreCard:
    xp: int
    level: int
    next_level_threshold: int

    def to_dict(self) -> dict:
        return {"xp": self.xp, "level": self.level, "nextLevelXP": self.next_level_threshold}
