"""
Achievement System

Evaluates a user's journal history against a fixed set of achievements:
- Writing (total words, number of entries)
- Consistency (consecutive writing days)
- Timing (late-night and early-morning writing)

Features:
- Unlock status and progress for every achievement in one pass
- Progress always clamped to [0, 100]
- Recommendations for locked achievements that are close to done

Everything here is a pure function of the entries passed in. The registry
is built once at import and never modified, so it can be read from any
number of requests at once.
"""

from datetime import tzinfo
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from eunoia.exceptions import AchievementNotFoundError
from eunoia.models.achievement import (
    Achievement,
    AchievementCategory,
    AchievementResult,
    AchievementTier,
)
from eunoia.models.entry import Entry
from eunoia.gamification.streak_system import longest_consecutive_day_run
from eunoia.utils.datetime_helpers import local_hour

logger = logging.getLogger(__name__)

NIGHT_OWL_HOURS = range(0, 5)
EARLY_BIRD_HOURS = range(5, 8)

RECOMMENDATION_THRESHOLD = 50


# ============================================
# Measures
# ============================================

def total_word_count(entries: Iterable[Entry]) -> int:
    """Total whitespace-delimited words across all entries"""
    return sum(entry.word_count for entry in entries)


def _words(entries: Sequence[Entry], tz: Optional[tzinfo]) -> float:
    return total_word_count(entries)


def _entry_count(entries: Sequence[Entry], tz: Optional[tzinfo]) -> float:
    return len(entries)


def _longest_run(entries: Sequence[Entry], tz: Optional[tzinfo]) -> float:
    return longest_consecutive_day_run(entries, tz)


def _written_during(hours: range):
    """1 if any entry was written during `hours`, else 0"""
    def measure(entries: Sequence[Entry], tz: Optional[tzinfo]) -> float:
        return 1 if any(local_hour(entry.created_at, tz) in hours for entry in entries) else 0
    return measure


# ============================================
# Registry
# ============================================

ACHIEVEMENTS: tuple = (
    Achievement(
        id="wordsmith",
        name="Wordsmith",
        description="Write over 1000 words total",
        emoji="✍️",
        requirement="1000+ words",
        tier=AchievementTier.BRONZE,
        category=AchievementCategory.WRITING,
        target=1000,
        measure=_words,
    ),
    Achievement(
        id="consistent_writer",
        name="Consistent Writer",
        description="Write on 7 consecutive days",
        emoji="📅",
        requirement="7-day streak",
        tier=AchievementTier.SILVER,
        category=AchievementCategory.CONSISTENCY,
        target=7,
        measure=_longest_run,
        # fewer than 7 entries can never span 7 days
        min_entries=7,
    ),
    Achievement(
        id="prolific_author",
        name="Prolific Author",
        description="Write 10 journal entries",
        emoji="📚",
        requirement="10 entries",
        tier=AchievementTier.BRONZE,
        category=AchievementCategory.WRITING,
        target=10,
        measure=_entry_count,
    ),
    Achievement(
        id="night_owl",
        name="Night Owl",
        description="Write an entry between midnight and 5 AM",
        emoji="🦉",
        requirement="Entry before 5 AM",
        tier=AchievementTier.SILVER,
        category=AchievementCategory.TIMING,
        target=1,
        measure=_written_during(NIGHT_OWL_HOURS),
    ),
    Achievement(
        id="early_bird",
        name="Early Bird",
        description="Write an entry between 5 AM and 8 AM",
        emoji="🌅",
        requirement="Entry between 5-8 AM",
        tier=AchievementTier.SILVER,
        category=AchievementCategory.TIMING,
        target=1,
        measure=_written_during(EARLY_BIRD_HOURS),
    ),
)

_ACHIEVEMENTS_BY_ID: Dict[str, Achievement] = {ach.id: ach for ach in ACHIEVEMENTS}


def get_achievement(achievement_id: str) -> Achievement:
    """
    Look up an achievement definition

    Raises:
        AchievementNotFoundError: If no achievement has this id
    """
    try:
        return _ACHIEVEMENTS_BY_ID[achievement_id]
    except KeyError:
        raise AchievementNotFoundError(achievement_id)


# ============================================
# Evaluation
# ============================================

def evaluate(entries: Iterable[Entry], tz: Optional[tzinfo] = None) -> List[AchievementResult]:
    """
    Evaluate every achievement against a user's entries

    Args:
        entries: All of the user's journal entries, in any order
        tz: Zone to read timestamps in (None keeps each timestamp's own clock)

    Returns:
        One AchievementResult per registry item, in registry order
    """
    entries = list(entries)

    results = [achievement.evaluate(entries, tz) for achievement in ACHIEVEMENTS]

    logger.debug(
        f"Evaluated {len(results)} achievements over {len(entries)} entries: "
        f"{sum(1 for r in results if r.unlocked)} unlocked"
    )

    return results


def get_achievement_summary(entries: Iterable[Entry], tz: Optional[tzinfo] = None) -> Dict[str, any]:
    """
    Get user's achievements split into unlocked and locked

    Returns:
        {
            'unlocked': [AchievementResult] in registry order,
            'locked': [AchievementResult] closest to completion first,
            'total_unlocked': int,
            'total_achievements': int
        }
    """
    results = evaluate(entries, tz)

    unlocked = [r for r in results if r.unlocked]
    locked = [r for r in results if not r.unlocked]
    locked.sort(key=lambda r: r.progress, reverse=True)

    return {
        'unlocked': unlocked,
        'locked': locked,
        'total_unlocked': len(unlocked),
        'total_achievements': len(results),
    }


def get_achievement_recommendations(
    entries: Iterable[Entry],
    limit: int = 3,
    tz: Optional[tzinfo] = None
) -> List[AchievementResult]:
    """
    Get locked achievements that are at least half done, closest first

    Args:
        entries: User's journal entries
        limit: Number of recommendations to return
        tz: Zone to read timestamps in

    Returns:
        Up to `limit` locked achievements with progress >= 50
    """
    locked = get_achievement_summary(entries, tz)['locked']

    close_to_completion = [r for r in locked if r.progress >= RECOMMENDATION_THRESHOLD]

    return close_to_completion[:limit]


def format_achievement_display(results: Sequence[AchievementResult]) -> str:
    """
    Format achievements as plain text

    Args:
        results: Output from evaluate()

    Returns:
        Unlocked badges grouped by tier (highest first) followed by progress
        on the locked ones
    """
    unlocked = [r for r in results if r.unlocked]
    locked = [r for r in results if not r.unlocked]

    lines = [f"🏆 YOUR ACHIEVEMENTS ({len(unlocked)}/{len(results)})\n"]

    if not unlocked:
        lines.append("No achievements unlocked yet. Keep writing! ✍️\n")

    for tier in sorted(AchievementTier, key=lambda t: t.rank, reverse=True):
        tier_results = [r for r in unlocked if r.achievement.tier == tier]
        if tier_results:
            lines.append(tier.value.upper())
            for r in tier_results:
                lines.append(f"{r.achievement.emoji} {r.achievement.name}")
            lines.append("")

    if locked:
        lines.append("IN PROGRESS")
        for r in locked:
            lines.append(
                f"{r.achievement.emoji} {r.achievement.name}: {r.progress:.0f}% "
                f"({r.achievement.requirement})"
            )

    return "\n".join(lines).rstrip()
