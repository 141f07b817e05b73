from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import ActivityCounts, ScoreCard


class ScoreCalculator(ABC):
    """Calculator interface (Strategy Pattern for scoring)."""

    @abstractmethod
    def score(self, counts: ActivityCounts) -> ScoreCard:
        raise NotImplementedError
