"""Time calculation utilities for the billing engine.

This module provides low-level utilities for time calculations including:
- Parsing and normalizing HH:MM time strings
- Converting time to minutes since midnight
- Calculating durations between times (wrapping past midnight)
- Converting minutes to decimal hours

Job times are wall-clock local times without a date. A job whose end time
is earlier than its start time is taken to finish on the next day.
"""

import datetime as dt
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

from staffing_billing.exceptions import InvalidTimeFormatError

MINUTES_PER_DAY = 24 * 60
HOURS_QUANTUM = Decimal("1E-20")

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")

TimeLike = Union[str, dt.time]


def normalize_time_to_hhmm(value: Any) -> str:
    """Normalize a stored time value to ``HH:MM``.

    Database rows carry ``HH:MM:SS`` or ``HH:MM:SS.sss``; the seconds are
    dropped. Any other shape, including trailing text, is unusable.

    Returns:
        The ``HH:MM`` part, or an empty string for unusable input

    Example:
        >>> normalize_time_to_hhmm("09:30:00")
        '09:30'
        >>> normalize_time_to_hhmm(None)
        ''
    """
    if isinstance(value, dt.time):
        return value.strftime("%H:%M")
    if not isinstance(value, str):
        return ""
    match = _TIME_PATTERN.match(value.strip())
    return f"{match.group(1)}:{match.group(2)}" if match else ""


def parse_time_string(value: TimeLike) -> dt.time:
    """Parse a job time into a dt.time.

    Args:
        value: ``HH:MM`` string (seconds are tolerated and dropped) or dt.time

    Returns:
        Time with second and microsecond set to zero

    Raises:
        InvalidTimeFormatError: If the value is not a valid 24-hour time

    Example:
        >>> parse_time_string("17:00")
        datetime.time(17, 0)
    """
    if isinstance(value, dt.time):
        return value.replace(second=0, microsecond=0)
    if not isinstance(value, str):
        raise InvalidTimeFormatError(value)

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeFormatError(value)

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormatError(value, f"Time out of range: {value!r}")
    return dt.time(hour, minute)


def convert_time_to_minutes(time: TimeLike) -> int:
    """Convert a time to minutes since midnight.

    Example:
        >>> convert_time_to_minutes(dt.time(9, 30))
        570
        >>> convert_time_to_minutes("23:59")
        1439
    """
    parsed = parse_time_string(time)
    return parsed.hour * 60 + parsed.minute


def calculate_duration_minutes(start_time: TimeLike, end_time: TimeLike) -> int:
    """Calculate the duration in minutes between two times.

    If the end time is earlier than the start time the job runs past
    midnight. Equal times give a duration of zero.

    Example:
        >>> calculate_duration_minutes("09:00", "17:00")
        480
        >>> calculate_duration_minutes("22:00", "02:00")
        240
    """
    start_minutes = convert_time_to_minutes(start_time)
    end_minutes = convert_time_to_minutes(end_time)

    duration = end_minutes - start_minutes
    if duration < 0:
        duration += MINUTES_PER_DAY
    return duration


def minutes_to_decimal_hours(minutes: int) -> Decimal:
    """Convert minutes to decimal hours.

    Minute counts that divide evenly are returned exactly. Repeating
    fractions (20 minutes is 0.333... h) are fixed at 20 decimal places,
    so adding and subtracting hour values never rounds again.

    Example:
        >>> minutes_to_decimal_hours(90)
        Decimal('1.5')
        >>> minutes_to_decimal_hours(10)
        Decimal('0.16666666666666666667')
    """
    hours = Decimal(minutes) / Decimal(60)
    fixed = hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)
    return hours if hours == fixed else fixed


def format_duration(hours: Union[Decimal, int, float]) -> str:
    """Format decimal hours as ``"Xh Ym"``.

    Example:
        >>> format_duration(Decimal("2.5"))
        '2h 30m'
        >>> format_duration(Decimal("0.75"))
        '45m'
        >>> format_duration(3)
        '3h'
    """
    value = Decimal(str(hours))
    whole = int(value)
    minutes = int(((value - whole) * 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if minutes == 60:
        whole, minutes = whole + 1, 0

    if minutes == 0:
        return f"{whole}h"
    if whole == 0:
        return f"{minutes}m"
    return f"{whole}h {minutes}m"
