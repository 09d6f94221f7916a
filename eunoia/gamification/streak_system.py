"""
Journaling Streak Tracking

Two different streaks exist and must not be mixed up:

- longest historical run: the longest stretch of consecutive calendar days
  with at least one entry, derived from the full entry history. Drives the
  Consistent Writer achievement.
- current streak: the counter stored on the user record and advanced each
  time the user writes. Drives the streak indicator. Only the advancement
  rule lives here; storing the counter is the entry store's job.
"""

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Iterable, List, Optional
import logging

from eunoia.models.entry import Entry
from eunoia.utils.datetime_helpers import local_date, days_between

logger = logging.getLogger(__name__)


def entry_dates(entries: Iterable[Entry], tz: Optional[tzinfo] = None) -> List[date]:
    """
    Sorted distinct calendar dates on which at least one entry was written

    Precondition: every entry has a valid `created_at`.
    """
    return sorted({local_date(entry.created_at, tz) for entry in entries})


def longest_consecutive_day_run(entries: Iterable[Entry], tz: Optional[tzinfo] = None) -> int:
    """
    Length in days of the longest run of consecutive writing days

    Entries may come in any order and several may share a day. Same-day
    entries count once and any gap of more than one day restarts the run.

    Args:
        entries: User's journal entries
        tz: Zone to read timestamps in (None keeps each timestamp's own clock)

    Returns:
        Longest run length, 0 for no entries

    Examples:
        days {D, D+1, D+2}           → 3
        days {D, D+1, D+3, D+4, D+5} → 3
        days {D, D, D+1}             → 2
    """
    dates = entry_dates(entries, tz)
    if not dates:
        return 0

    longest = 1
    current = 1
    for previous, following in zip(dates, dates[1:]):
        if days_between(previous, following) == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1

    return longest


@dataclass(frozen=True)
class StreakUpdate:
    """Outcome of recording one day of activity against the current streak"""
    current_streak: int
    last_activity_date: date
    changed: bool


def advance_current_streak(
    current_streak: int,
    last_activity_date: Optional[date],
    activity_date: date
) -> StreakUpdate:
    """
    Advance the user's current streak counter for a new activity

    Logic:
    - No previous activity: streak starts at 1
    - Activity on the same day: already counted, no change
    - Activity on the next day: streak continues (+1)
    - Anything else: streak resets to 1

    Args:
        current_streak: Counter currently stored on the user record
        last_activity_date: Day of the last counted activity, if any
        activity_date: Day of the new activity

    Returns:
        StreakUpdate with the new counter and whether it needs saving
    """
    if last_activity_date is None:
        return StreakUpdate(current_streak=1, last_activity_date=activity_date, changed=True)

    gap_days = days_between(last_activity_date, activity_date)

    if gap_days == 0:
        return StreakUpdate(
            current_streak=current_streak,
            last_activity_date=last_activity_date,
            changed=False
        )

    if gap_days == 1:
        return StreakUpdate(
            current_streak=current_streak + 1,
            last_activity_date=activity_date,
            changed=True
        )

    logger.info(f"Streak broken: was {current_streak}, gap was {gap_days} days")
    return StreakUpdate(current_streak=1, last_activity_date=activity_date, changed=True)


def format_streak_display(streak: int) -> str:
    """
    Format the current streak for the streak indicator

    Args:
        streak: Current streak counter

    Returns:
        Display text, e.g. "🔥 5 day streak - Keep it going!"
    """
    if streak <= 0:
        return "No active streak yet. Write today to start one! ✍️"

    return f"🔥 {streak} day streak - Keep it going!"
