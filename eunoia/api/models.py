"""Pydantic models for API request/response validation"""
from typing import Optional, List
from pydantic import BaseModel, Field
from datetime import datetime

from eunoia.models.achievement import Achievement, AchievementResult
from eunoia.models.entry import Entry


class EntriesRequest(BaseModel):
    """A user's entries, already fetched from the entry store"""
    entries: List[Entry] = Field(default_factory=list, description="All of the user's journal entries")
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone to read entry timestamps in (defaults to ENTRY_TIMEZONE)"
    )


class AchievementInfo(BaseModel):
    """Display metadata for one achievement"""
    id: str
    name: str
    description: str
    emoji: str
    requirement: str
    tier: str
    category: str

    @classmethod
    def from_achievement(cls, achievement: Achievement) -> "AchievementInfo":
        return cls(
            id=achievement.id,
            name=achievement.name,
            description=achievement.description,
            emoji=achievement.emoji,
            requirement=achievement.requirement,
            tier=achievement.tier.value,
            category=achievement.category.value,
        )


class AchievementProgress(AchievementInfo):
    """Achievement metadata with the user's status"""
    unlocked: bool
    progress: float = Field(..., ge=0, le=100, description="Percent toward unlocking")

    @classmethod
    def from_result(cls, result: AchievementResult) -> "AchievementProgress":
        info = AchievementInfo.from_achievement(result.achievement)
        return cls(**info.model_dump(), unlocked=result.unlocked, progress=result.progress)


class AchievementListResponse(BaseModel):
    """Every achievement, in display order"""
    achievements: List[AchievementInfo]


class EvaluationResponse(BaseModel):
    """Response with achievement status for every achievement"""
    results: List[AchievementProgress]
    total_unlocked: int
    total_achievements: int


class RecommendationResponse(BaseModel):
    """Locked achievements closest to completion"""
    recommendations: List[AchievementProgress]


class StreakResponse(BaseModel):
    """Response with longest streak info"""
    longest_streak: int = Field(..., description="Longest run of consecutive writing days")
    active_days: int = Field(..., description="Distinct days with at least one entry")


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Check timestamp")
