"""Rate resolution from job, facility and interpreter records.

Builds the ``RateInputs`` for a job. Precedence for each value:

- Hourly rates: job override (an explicit 0 counts), then the facility or
  interpreter default, then 0
- Trilingual uplift: added to the facility hourly rates only
- Mileage rates: first non-zero of job override, the side's own record,
  the facility record, then the configured default mileage rate
- Adjustments and expenses: the job value, or 0 when blank
"""

import logging
from decimal import Decimal
from typing import Optional

from staffing_billing.config.settings import BillingSettings
from staffing_billing.models.rates import RateInputs, SideRates
from staffing_billing.models.records import Facility, Interpreter, Job
from staffing_billing.utils.numeric import ZERO, is_zero_or_absent, to_safe_decimal

logger = logging.getLogger(__name__)


def _first_set(*values: Optional[Decimal]) -> Decimal:
    for value in values:
        if value is not None:
            return value
    return ZERO


def resolve_mileage_rate(
    job_rate: Optional[Decimal],
    record_rate: Optional[Decimal],
    facility: Optional[Facility],
    settings: BillingSettings,
) -> Decimal:
    """Resolve one side's mileage rate.

    Zero and blank rates are skipped at every level.

    Args:
        job_rate: Mileage rate set on the job for this side
        record_rate: Mileage rate on the side's own record
        facility: Facility record, whose rate is the shared fallback
        settings: Settings holding the default mileage rate

    Returns:
        The first non-zero rate, or settings.default_mileage_rate

    Example:
        >>> resolve_mileage_rate(None, Decimal("0"), None, BillingSettings())
        Decimal('0.70')
    """
    facility_rate = facility.rate_mileage if facility else None
    for source, rate in (
        ("job", job_rate),
        ("record", record_rate),
        ("facility", facility_rate),
    ):
        if not is_zero_or_absent(rate):
            logger.debug(f"Mileage rate {rate} taken from {source}")
            return rate

    logger.debug(f"Mileage rate falling back to default {settings.default_mileage_rate}")
    return settings.default_mileage_rate


def resolve_minimum_hours(
    facility: Optional[Facility], settings: BillingSettings
) -> Decimal:
    """Return the facility's minimum billable hours, or the configured default."""
    if facility is not None and facility.minimum_billable_hours is not None:
        return facility.minimum_billable_hours
    return settings.default_minimum_hours


def resolve_facility_rates(
    job: Job, facility: Optional[Facility], settings: BillingSettings
) -> SideRates:
    """Resolve facility-side rates, with the trilingual uplift included."""
    uplift = to_safe_decimal(job.trilingual_rate_uplift)
    business_rate = _first_set(
        job.facility_rate_business, facility.rate_business_hours if facility else None
    )
    after_hours_rate = _first_set(
        job.facility_rate_after_hours, facility.rate_after_hours if facility else None
    )

    return SideRates(
        business_rate=business_rate + uplift,
        after_hours_rate=after_hours_rate + uplift,
        mileage_rate=resolve_mileage_rate(
            job.facility_rate_mileage,
            facility.rate_mileage if facility else None,
            facility,
            settings,
        ),
        rate_adjustment=to_safe_decimal(job.facility_rate_adjustment),
    )


def resolve_interpreter_rates(
    job: Job,
    interpreter: Optional[Interpreter],
    facility: Optional[Facility],
    settings: BillingSettings,
) -> SideRates:
    """Resolve interpreter-side rates. The trilingual uplift never applies here."""
    return SideRates(
        business_rate=_first_set(
            job.interpreter_rate_business,
            interpreter.rate_business_hours if interpreter else None,
        ),
        after_hours_rate=_first_set(
            job.interpreter_rate_after_hours,
            interpreter.rate_after_hours if interpreter else None,
        ),
        mileage_rate=resolve_mileage_rate(
            job.interpreter_rate_mileage,
            interpreter.rate_mileage if interpreter else None,
            facility,
            settings,
        ),
        rate_adjustment=to_safe_decimal(job.interpreter_rate_adjustment),
    )


def resolve_rate_inputs(
    job: Job,
    facility: Optional[Facility],
    interpreter: Optional[Interpreter],
    settings: BillingSettings,
) -> RateInputs:
    """Assemble calculator inputs for a job.

    Args:
        job: The job record with any per-job overrides and expenses
        facility: The job's facility, if known
        interpreter: The assigned interpreter, if any
        settings: Settings providing the default mileage rate

    Returns:
        RateInputs ready for ``calculate_billable_total``
    """
    return RateInputs(
        facility=resolve_facility_rates(job, facility, settings),
        interpreter=resolve_interpreter_rates(job, interpreter, facility, settings),
        mileage=to_safe_decimal(job.mileage),
        travel_time_hours=to_safe_decimal(job.travel_time_hours),
        parking=to_safe_decimal(job.parking),
        tolls=to_safe_decimal(job.tolls),
        misc_fee=to_safe_decimal(job.misc_fee),
    )
