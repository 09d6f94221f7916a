"""Journal entry models"""
from enum import Enum
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class Mood(str, Enum):
    """Mood options offered by the journal editor"""
    VERY_SAD = "very_sad"
    SAD = "sad"
    NEUTRAL = "neutral"
    HAPPY = "happy"
    VERY_HAPPY = "very_happy"


class Entry(BaseModel):
    """
    A single journal entry as supplied by the entry store

    Entries are read-only input to the achievement engine.
    `created_at` may be naive or timezone-aware; see utils.datetime_helpers.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    user_id: int
    title: str = ""
    content: str
    mood: Mood = Mood.NEUTRAL
    category: str = "general"
    created_at: datetime

    @property
    def word_count(self) -> int:
        """Number of whitespace-delimited words in the entry body"""
        return len(self.content.split())
