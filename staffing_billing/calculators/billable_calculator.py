"""Billable total calculator for interpreter jobs.

This module computes the two cost perspectives of a job:
- Facility side: what the client facility is charged
- Interpreter side: what the interpreter is paid

Both sides bill the same hours split. Hourly rates get the side's rate
adjustment added before multiplying. Mileage uses each side's own rate.
Parking, tolls and miscellaneous fees are pass-through costs added to both
sides. Only the interpreter is paid for travel time.

No rounding happens here; results are exact Decimal sums and are rounded
only for display or persistence.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from staffing_billing.calculators.hours_splitter import HoursSplit
from staffing_billing.models.rates import RateInputs, SideRates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SideTotal:
    """Cost breakdown for one side of a job.

    Attributes:
        business_rate: Business rate after rate adjustment
        after_hours_rate: After-hours rate after rate adjustment
        mileage_rate: Mileage rate used
        rate_adjustment: Flat $/hr adjustment that was applied
        business_total: business_hours × business_rate
        after_hours_total: after_hours × after_hours_rate
        mileage_total: mileage × mileage_rate
        fees_total: parking + tolls + misc_fee
        total: Sum of all line items
    """

    business_rate: Decimal
    after_hours_rate: Decimal
    mileage_rate: Decimal
    rate_adjustment: Decimal
    business_total: Decimal
    after_hours_total: Decimal
    mileage_total: Decimal
    fees_total: Decimal
    total: Decimal

    @property
    def hourly_total(self) -> Decimal:
        """Business plus after-hours totals (the persisted hourly total)."""
        return self.business_total + self.after_hours_total


@dataclass(frozen=True)
class InterpreterTotal(SideTotal):
    """Interpreter-side breakdown, including paid travel time.

    Attributes:
        travel_time_rate: Adjusted rate of whichever hour type dominates the job
        travel_time_total: travel_time_hours × travel_time_rate
    """

    travel_time_rate: Decimal = Decimal("0")
    travel_time_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class BillableTotal:
    """Complete billable breakdown of a job.

    Attributes:
        facility: Facility charge breakdown
        interpreter: Interpreter pay breakdown
        mileage: Miles driven (echoed input)
        travel_time_hours: Travel time (echoed input)
        parking: Parking cost (echoed input)
        tolls: Toll cost (echoed input)
        misc_fee: Miscellaneous cost (echoed input)

    Example:
        >>> total = calculate_billable_total(
        ...     split_hours("09:00", "17:00"),
        ...     RateInputs(
        ...         facility=SideRates(business_rate=65, rate_adjustment=5, mileage_rate="0.7"),
        ...         mileage=20,
        ...         parking=10,
        ...     ),
        ... )
        >>> total.facility.total
        Decimal('584.0')
    """

    facility: SideTotal
    interpreter: InterpreterTotal
    mileage: Decimal
    travel_time_hours: Decimal
    parking: Decimal
    tolls: Decimal
    misc_fee: Decimal


def _hourly_totals(hours_split: HoursSplit, rates: SideRates):
    business_total = hours_split.business_hours * rates.adjusted_business_rate
    after_hours_total = hours_split.after_hours * rates.adjusted_after_hours_rate
    return business_total, after_hours_total


def select_travel_time_rate(hours_split: HoursSplit, rates: SideRates) -> Decimal:
    """Pick the travel-time rate from the dominant hour type.

    Business hours win ties, so a job split evenly pays travel time at the
    adjusted business rate.
    """
    if hours_split.business_hours >= hours_split.after_hours:
        return rates.adjusted_business_rate
    return rates.adjusted_after_hours_rate


def calculate_facility_total(
    hours_split: HoursSplit, rate_inputs: RateInputs
) -> SideTotal:
    """Calculate what the facility is charged.

    Formula: business + after-hours + mileage + fees. Travel time is never
    billed to the facility.
    """
    rates = rate_inputs.facility
    business_total, after_hours_total = _hourly_totals(hours_split, rates)
    mileage_total = rate_inputs.mileage * rates.mileage_rate
    fees_total = rate_inputs.fees_total

    return SideTotal(
        business_rate=rates.adjusted_business_rate,
        after_hours_rate=rates.adjusted_after_hours_rate,
        mileage_rate=rates.mileage_rate,
        rate_adjustment=rates.rate_adjustment,
        business_total=business_total,
        after_hours_total=after_hours_total,
        mileage_total=mileage_total,
        fees_total=fees_total,
        total=business_total + after_hours_total + mileage_total + fees_total,
    )


def calculate_interpreter_total(
    hours_split: HoursSplit, rate_inputs: RateInputs
) -> InterpreterTotal:
    """Calculate what the interpreter is paid.

    Formula: business + after-hours + mileage + travel time + fees.
    """
    rates = rate_inputs.interpreter
    business_total, after_hours_total = _hourly_totals(hours_split, rates)
    mileage_total = rate_inputs.mileage * rates.mileage_rate
    travel_time_rate = select_travel_time_rate(hours_split, rates)
    travel_time_total = rate_inputs.travel_time_hours * travel_time_rate
    fees_total = rate_inputs.fees_total

    return InterpreterTotal(
        business_rate=rates.adjusted_business_rate,
        after_hours_rate=rates.adjusted_after_hours_rate,
        mileage_rate=rates.mileage_rate,
        rate_adjustment=rates.rate_adjustment,
        business_total=business_total,
        after_hours_total=after_hours_total,
        mileage_total=mileage_total,
        fees_total=fees_total,
        total=(
            business_total
            + after_hours_total
            + mileage_total
            + travel_time_total
            + fees_total
        ),
        travel_time_rate=travel_time_rate,
        travel_time_total=travel_time_total,
    )


def calculate_billable_total(
    hours_split: HoursSplit, rate_inputs: RateInputs
) -> BillableTotal:
    """Calculate the facility and interpreter breakdowns for a job.

    The calculator is uplift-agnostic: callers add any trilingual uplift to
    the facility rates before building ``rate_inputs``.

    Args:
        hours_split: Output of ``split_hours``
        rate_inputs: Rates for both sides and the shared trip expenses

    Returns:
        BillableTotal with both breakdowns and the echoed expense inputs
    """
    facility = calculate_facility_total(hours_split, rate_inputs)
    interpreter = calculate_interpreter_total(hours_split, rate_inputs)

    logger.debug(
        f"Billable total: facility {facility.total}, interpreter {interpreter.total} "
        f"({hours_split.business_hours}h business, {hours_split.after_hours}h after)"
    )

    return BillableTotal(
        facility=facility,
        interpreter=interpreter,
        mileage=rate_inputs.mileage,
        travel_time_hours=rate_inputs.travel_time_hours,
        parking=rate_inputs.parking,
        tolls=rate_inputs.tolls,
        misc_fee=rate_inputs.misc_fee,
    )
