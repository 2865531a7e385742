"""Recompute-on-change billing derivation.

Screens recalculate the breakdown on every edit. ``BillingRecalculator``
memoizes both steps on their full input tuple, so unchanged inputs return
the previous result and any changed input yields a fresh one.
"""

import functools
from typing import Dict, NamedTuple, Tuple

from staffing_billing.calculators.billable_calculator import (
    BillableTotal,
    calculate_billable_total,
)
from staffing_billing.calculators.hours_splitter import HoursSplit, split_hours
from staffing_billing.calculators.time_utils import TimeLike, parse_time_string
from staffing_billing.models.rates import RateInputs
from staffing_billing.utils.numeric import NumberLike, to_decimal


class CacheStats(NamedTuple):
    hits: int
    misses: int
    currsize: int


class BillingRecalculator:
    """Memoized hours split and billable total derivation.

    Example:
        >>> recalculator = BillingRecalculator()
        >>> split, total = recalculator.recompute("09:00", "17:00", 2, RateInputs())
        >>> recalculator.recompute("09:00", "17:00", 2, RateInputs())[1] is total
        True
    """

    def __init__(self, maxsize: int = 128):
        self._split = functools.lru_cache(maxsize=maxsize)(split_hours)
        self._total = functools.lru_cache(maxsize=maxsize)(calculate_billable_total)

    def recompute(
        self,
        start_time: TimeLike,
        end_time: TimeLike,
        minimum_hours: NumberLike,
        rate_inputs: RateInputs,
    ) -> Tuple[HoursSplit, BillableTotal]:
        """Return the hours split and billable total for the given inputs.

        Raises:
            InvalidTimeFormatError: If either time is malformed
        """
        # Parse so "09:00" and "09:00:00" share a cache entry
        start_key = parse_time_string(start_time)
        end_key = parse_time_string(end_time)
        hours_split = self._split(start_key, end_key, to_decimal(minimum_hours))
        return hours_split, self._total(hours_split, rate_inputs)

    def cache_info(self) -> Dict[str, CacheStats]:
        """Hit/miss statistics for the split and total caches."""
        stats = {}
        for name, cached in (("split", self._split), ("total", self._total)):
            info = cached.cache_info()
            stats[name] = CacheStats(info.hits, info.misses, info.currsize)
        return stats

    def clear(self) -> None:
        self._split.cache_clear()
        self._total.cache_clear()
