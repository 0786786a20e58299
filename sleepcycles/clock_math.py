"""
Wall-clock time calculations.

Parses and formats 12-hour clock times and measures overnight spans.

Times parsed with a timezone are localized (pytz) so cycle arithmetic
runs on absolute instants and stays correct across DST changeovers.
Naive times are treated as system-local wall-clock values.
"""

from datetime import datetime, time, timedelta

import pytz

from .types import Period

MINUTES_PER_DAY = 24 * 60


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Serverless hosts run in UTC, so "today" for the user has to come from
    their own timezone rather than datetime.now().

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current datetime in the specified timezone (naive, for local comparisons)
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)


def to_24_hour(hour: int, period: Period) -> int:
    """Convert a 12-hour clock hour to 0-23. 12 AM is midnight, 12 PM is noon."""
    if period == "PM" and hour != 12:
        return hour + 12
    if period == "AM" and hour == 12:
        return 0
    return hour


def parse_clock_time(time_str: str, period: Period, tz_name: str | None = None) -> datetime:
    """
    Parse a 12-hour "H:MM" string plus AM/PM into a datetime on today's date.

    Args:
        time_str: "H:MM" or "HH:MM" (e.g., "7:00", "11:45")
        period: "AM" or "PM"
        tz_name: Optional IANA timezone; decides what "today" is and the
            result is localized to it. Defaults to the local clock.

    Returns:
        Datetime with seconds and microseconds zeroed; timezone-aware when
        tz_name is given, naive otherwise

    Raises:
        ValueError: time_str is not "H:MM"
    """
    parts = time_str.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time: {time_str!r} (expected H:MM)")
    hour = to_24_hour(int(parts[0]), period)
    minute = int(parts[1])

    if tz_name:
        now = get_current_datetime_in_tz(tz_name)
        wall_clock = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
        return pytz.timezone(tz_name).localize(wall_clock)

    now = datetime.now()
    return now.replace(hour=hour, minute=minute, second=0, microsecond=0)


def shift_minutes(t: datetime, minutes: int) -> datetime:
    """
    Move a datetime by elapsed minutes (negative = earlier).

    The shift is done in UTC and converted back, so the result reads as
    the local wall clock at that instant. Aware values keep their zone;
    naive values are treated as system-local and stay naive.
    """
    delta = timedelta(minutes=minutes)
    if t.tzinfo is None:
        return (t.astimezone(pytz.UTC) + delta).astimezone().replace(tzinfo=None)
    return (t.astimezone(pytz.UTC) + delta).astimezone(t.tzinfo)


def format_clock_time(t: datetime | time) -> str:
    """Format as "H:MM AM/PM" (12-hour, no leading zero on the hour)."""
    hour = t.hour
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{t.minute:02d} {period}"


def duration_minutes(start: datetime, end: datetime) -> int:
    """
    Whole minutes from start to end.

    A negative span means end is on the following day, so a day is added
    (23:00 -> 07:00 is 480, not -960).
    """
    minutes = int((end - start).total_seconds() // 60)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def format_duration(minutes: int) -> str:
    """Format minutes as "7h" or "7h 30m"."""
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
