"""Hours splitter for interpreter jobs.

Partitions a job's wall-clock duration into business hours (08:00-17:00)
and after hours, then applies the minimum-billable-hours floor.

Any shortfall below the minimum is added to business hours, regardless of
when the job actually ran. Historical invoices were produced this way and
the "(min)" badge on the job screen relies on ``minimum_applied``.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Tuple

from staffing_billing.calculators.time_utils import (
    MINUTES_PER_DAY,
    TimeLike,
    calculate_duration_minutes,
    convert_time_to_minutes,
    minutes_to_decimal_hours,
)
from staffing_billing.utils.numeric import ZERO, NumberLike, to_decimal

logger = logging.getLogger(__name__)

BUSINESS_START_MINUTE = 8 * 60  # 08:00
BUSINESS_END_MINUTE = 17 * 60  # 17:00, exclusive
DEFAULT_MINIMUM_HOURS = Decimal("2")

HoursType = Literal["business", "after", "mixed"]


@dataclass(frozen=True)
class HoursSplit:
    """Business/after-hours breakdown of a job.

    Attributes:
        total_hours: Actual duration between start and end time
        business_hours: Hours inside 08:00-17:00, plus minimum_applied
        after_hours: Hours outside 08:00-17:00
        billable_hours: max(total_hours, minimum_hours)
        minimum_applied: Hours added to reach the minimum (0 if none)
        hours_type: "business", "after" or "mixed", from the actual minutes worked
    """

    total_hours: Decimal
    business_hours: Decimal
    after_hours: Decimal
    billable_hours: Decimal
    minimum_applied: Decimal
    hours_type: HoursType

    @property
    def raw_business_hours(self) -> Decimal:
        """Business hours actually worked, without the minimum top-up."""
        return self.business_hours - self.minimum_applied


def _overlap(start: int, end: int, window_start: int, window_end: int) -> int:
    return max(0, min(end, window_end) - max(start, window_start))


def count_business_minutes(start_minute: int, total_minutes: int) -> Tuple[int, int]:
    """Count business and after-hours minutes in a job.

    The job interval ``[start_minute, start_minute + total_minutes)`` is cut
    at midnight and each piece is intersected with the business window.

    Args:
        start_minute: Start as minutes since midnight (0-1439)
        total_minutes: Job length in minutes (0-1439)

    Returns:
        Tuple of (business_minutes, after_minutes)

    Example:
        >>> count_business_minutes(7 * 60, 120)
        (60, 60)
    """
    end_minute = start_minute + total_minutes
    segments = [(start_minute, min(end_minute, MINUTES_PER_DAY))]
    if end_minute > MINUTES_PER_DAY:
        segments.append((0, end_minute - MINUTES_PER_DAY))

    business_minutes = sum(
        _overlap(seg_start, seg_end, BUSINESS_START_MINUTE, BUSINESS_END_MINUTE)
        for seg_start, seg_end in segments
    )
    return business_minutes, total_minutes - business_minutes


def split_hours(
    start_time: TimeLike,
    end_time: TimeLike,
    minimum_hours: NumberLike = DEFAULT_MINIMUM_HOURS,
) -> HoursSplit:
    """Split a job into business and after hours.

    Args:
        start_time: Job start (``HH:MM`` or dt.time)
        end_time: Job end; earlier than start means the job ends next day
        minimum_hours: Minimum billable hours (default 2)

    Returns:
        HoursSplit for the job

    Raises:
        InvalidTimeFormatError: If either time cannot be parsed
        NonNumericInputError: If minimum_hours is not a number
        ValueError: If minimum_hours is negative

    Example:
        >>> split = split_hours("09:00", "09:30")
        >>> split.billable_hours, split.minimum_applied, split.business_hours
        (Decimal('2'), Decimal('1.5'), Decimal('2.0'))
    """
    minimum = to_decimal(minimum_hours)
    if minimum < ZERO:
        raise ValueError(f"minimum_hours must be non-negative, got {minimum}")

    start_minute = convert_time_to_minutes(start_time)
    total_minutes = calculate_duration_minutes(start_time, end_time)
    business_minutes, after_minutes = count_business_minutes(
        start_minute, total_minutes
    )

    # after_hours is derived so the buckets add up to total_hours exactly
    total_hours = minutes_to_decimal_hours(total_minutes)
    business_hours = minutes_to_decimal_hours(business_minutes)
    after_hours = total_hours - business_hours

    if minimum > total_hours:
        billable_hours = minimum
        minimum_applied = minimum - total_hours
    else:
        billable_hours = total_hours
        minimum_applied = ZERO

    if after_minutes == 0:
        hours_type: HoursType = "business"
    elif business_minutes == 0:
        hours_type = "after"
    else:
        hours_type = "mixed"

    logger.debug(
        f"Split {start_time}-{end_time}: {business_minutes} business min, "
        f"{after_minutes} after-hours min, minimum applied {minimum_applied}h"
    )

    return HoursSplit(
        total_hours=total_hours,
        business_hours=business_hours + minimum_applied,
        after_hours=after_hours,
        billable_hours=billable_hours,
        minimum_applied=minimum_applied,
        hours_type=hours_type,
    )
