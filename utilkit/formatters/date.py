"""Date and time formatting utilities."""

import math
from datetime import date as date_type, datetime, time
from typing import Any, Optional, Union

from dateutil import parser as dateutil_parser

from utilkit.constants import (
    DATE_TOKEN_PATTERN,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    JUST_NOW,
    JUST_NOW_SECONDS,
    MINUTES_PER_HOUR,
    MS_PER_DAY,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
)
from utilkit.logging_config import get_logger

logger = get_logger(__name__)

# datetime, date, ISO 8601 text or epoch milliseconds
DateLike = Union[datetime, date_type, str, int, float]


def _epoch_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, truncated like a JS timestamp."""
    return round(moment.timestamp() * 1_000_000) // 1000


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Coerce a date-like value into a datetime.

    Naive values are read as local time; aware values are converted to the
    local zone so component accessors always see the local calendar.
    Strings must be ISO 8601 (parsed by dateutil's isoparse) so missing
    fields are never filled in from the clock. Numbers are epoch milliseconds.

    Args:
        value: datetime, date, date string or epoch milliseconds

    Returns:
        The datetime, or None if the value is not a usable date
    """
    # bool is an int subclass but never a timestamp
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, datetime):
            moment = value
        elif isinstance(value, date_type):
            moment = datetime.combine(value, time())
        elif isinstance(value, str):
            if not value.strip():
                return None
            moment = dateutil_parser.isoparse(value.strip())
        elif isinstance(value, (int, float)):
            if not math.isfinite(value):
                return None
            moment = datetime.fromtimestamp(value / MS_PER_SECOND)
        else:
            return None

        if moment.tzinfo is not None:
            moment = moment.astimezone()
        _epoch_ms(moment)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Could not coerce {value!r} to a date: {e}")
        return None

    return moment


def is_valid_date(value: Any) -> bool:
    """Return True if the value can be used as a date."""
    return to_datetime(value) is not None


def pad_zero(num: int, length: int = 2) -> str:
    """
    Left-pad a number with zeros.

    Args:
        num: Non-negative integer
        length: Minimum width

    Returns:
        Padded string, never truncated
    """
    return str(num).rjust(length, "0")


def format_date(date: Any, pattern: Optional[str]) -> Optional[str]:
    """
    Format a date according to a token pattern.

    Supported tokens:
        YYYY  full year          YY  last two digits of the year
        MM    month 01-12        M   month 1-12
        DD    day 01-31          D   day 1-31
        HH    hours 00-23        H   hours 0-23
        mm    minutes 00-59      m   minutes 0-59
        ss    seconds 00-59      s   seconds 0-59

    Everything else in the pattern is copied through as-is.

    Args:
        date: Date-like value
        pattern: Format pattern, e.g. "YYYY-MM-DD HH:mm:ss"

    Returns:
        Formatted string, or None if either argument is missing or invalid

    Example:
        format_date(datetime(2024, 3, 15, 14, 30, 45), "DD.MM.YYYY") -> "15.03.2024"
    """
    if date is None or pattern is None or not isinstance(pattern, str):
        return None

    moment = to_datetime(date)
    if moment is None:
        return None

    year = str(moment.year)
    values = {
        "YYYY": year,
        "YY": year[-2:],
        "MM": pad_zero(moment.month),
        "M": str(moment.month),
        "DD": pad_zero(moment.day),
        "D": str(moment.day),
        "HH": pad_zero(moment.hour),
        "H": str(moment.hour),
        "mm": pad_zero(moment.minute),
        "m": str(moment.minute),
        "ss": pad_zero(moment.second),
        "s": str(moment.second),
    }

    return DATE_TOKEN_PATTERN.sub(lambda match: values[match.group(0)], pattern)


def time_ago(date: Any, now: Optional[DateLike] = None) -> Optional[str]:
    """
    Describe a date relative to a reference instant.

    Args:
        date: Date-like value to describe
        now: Reference instant (defaults to the current time)

    Returns:
        "just now", "<n> <unit(s)> ago" or "in <n> <unit(s)>",
        or None if either date is invalid

    Example:
        "just now", "3 hours ago", "in 2 weeks"
    """
    moment = to_datetime(date)
    if moment is None:
        return None

    reference = datetime.now() if now is None else to_datetime(now)
    if reference is None:
        return None

    diff_ms = _epoch_ms(reference) - _epoch_ms(moment)
    is_future = diff_ms < 0

    seconds = abs(diff_ms) // MS_PER_SECOND
    minutes = seconds // SECONDS_PER_MINUTE
    hours = minutes // MINUTES_PER_HOUR
    days = hours // HOURS_PER_DAY
    weeks = days // DAYS_PER_WEEK
    months = days // DAYS_PER_MONTH
    years = days // DAYS_PER_YEAR

    # Largest non-zero unit wins, seconds otherwise
    value, unit = seconds, "second"
    for amount, name in (
        (years, "year"),
        (months, "month"),
        (weeks, "week"),
        (days, "day"),
        (hours, "hour"),
        (minutes, "minute"),
    ):
        if amount > 0:
            value, unit = amount, name
            break

    if not is_future and seconds < JUST_NOW_SECONDS:
        return JUST_NOW

    label = unit if value == 1 else f"{unit}s"
    if is_future:
        return f"in {value} {label}"
    return f"{value} {label} ago"


def days_between(first: Any, second: Any) -> Optional[int]:
    """
    Count the whole days between two dates.

    Args:
        first: Date-like value
        second: Date-like value

    Returns:
        Absolute number of complete 24h spans, or None if either date is invalid
    """
    start = to_datetime(first)
    end = to_datetime(second)
    if start is None or end is None:
        return None

    return abs(_epoch_ms(end) - _epoch_ms(start)) // MS_PER_DAY
