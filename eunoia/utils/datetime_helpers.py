"""
Date/time helpers for reading entry timestamps

Entry timestamps arrive either naive or timezone-aware. The engine reads
each one on its own wall clock unless the caller supplies an explicit zone:

- tz=None: naive stays naive, aware is read in its own offset
- tz=<zone>: aware is converted to the zone, naive is assumed to be in it

The default keeps the behavior of the journaling client, which read dates
in whatever local zone the runtime happened to have. That makes a server
move silently change which days count as consecutive and which entries
count as night owl. The right zone (user's, server's, UTC) is an open
product decision, so nothing here picks one.
"""

import logging
from datetime import datetime, date, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from eunoia.exceptions import ValidationError

logger = logging.getLogger(__name__)


def resolve_timezone(name: Optional[str]) -> Optional[ZoneInfo]:
    """
    Turn an IANA timezone name into a ZoneInfo

    Args:
        name: Timezone name (e.g. "America/New_York"); empty or None means no zone

    Returns:
        ZoneInfo, or None when no name was given

    Raises:
        ValidationError: If the name is not a known timezone
    """
    if not name:
        return None

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(
            message=f"Unknown timezone '{name}'",
            field="timezone",
            value=name,
            cause=e
        )


def to_local(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return `dt` on the wall clock the engine should read it with"""
    if tz is None:
        return dt

    if dt.tzinfo is None:
        logger.debug(f"Assuming naive timestamp {dt} is in {tz}")
        return dt.replace(tzinfo=tz)

    return dt.astimezone(tz)


def local_date(dt: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of a timestamp"""
    return to_local(dt, tz).date()


def local_hour(dt: datetime, tz: Optional[tzinfo] = None) -> int:
    """Hour of day (0-23) of a timestamp"""
    return to_local(dt, tz).hour


def days_between(start: date, end: date) -> int:
    """Number of calendar days from start to end (negative if end is earlier)"""
    return (end - start).days
