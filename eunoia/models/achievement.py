"""Achievement models for gamification"""
from enum import Enum
from datetime import tzinfo
from typing import Callable, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from eunoia.models.entry import Entry
from eunoia.utils.math_utils import calculate_percentage

# Raw quantity an achievement is measured by (words, entries, days...)
EntryMeasure = Callable[[Sequence[Entry], Optional[tzinfo]], float]


class AchievementCategory(str, Enum):
    """Achievement categories"""
    WRITING = "writing"
    CONSISTENCY = "consistency"
    TIMING = "timing"


class AchievementTier(str, Enum):
    """Achievement tiers, lowest first. Display only."""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @property
    def rank(self) -> int:
        return list(AchievementTier).index(self)


class Achievement(BaseModel):
    """
    Achievement definition

    Unlock status and progress are both derived from `measure` against
    `target`, so an achievement is unlocked exactly when its progress
    reaches 100. `min_entries` short-circuits collections too small to
    possibly qualify.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    emoji: str
    requirement: str
    tier: AchievementTier
    category: AchievementCategory
    target: float
    measure: EntryMeasure = Field(exclude=True, repr=False)
    min_entries: int = 0

    def progress(self, entries: Sequence[Entry], tz: Optional[tzinfo] = None) -> float:
        """Percentage toward unlocking, in [0, 100]"""
        if not entries:
            return 0.0
        return calculate_percentage(self.measure(entries, tz), self.target)

    def is_unlocked(self, entries: Sequence[Entry], tz: Optional[tzinfo] = None) -> bool:
        return self.evaluate(entries, tz).unlocked

    def evaluate(self, entries: Sequence[Entry], tz: Optional[tzinfo] = None) -> "AchievementResult":
        """Progress and unlock status from a single run of the measure"""
        progress = self.progress(entries, tz)
        unlocked = len(entries) >= self.min_entries and progress >= 100
        return AchievementResult(achievement=self, unlocked=unlocked, progress=progress)


class AchievementResult(BaseModel):
    """Evaluation of one achievement against a user's entries"""
    achievement: Achievement
    unlocked: bool
    progress: float
