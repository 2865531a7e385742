"""Job billing orchestration.

Runs the full calculation for one job: hours split, rate resolution and
billable totals, and produces the reduced projection stored on the job
record (hourly and billable totals for each side, rounded to cents).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from staffing_billing.calculators.billable_calculator import (
    BillableTotal,
    calculate_billable_total,
)
from staffing_billing.calculators.hours_splitter import HoursSplit, split_hours
from staffing_billing.config.settings import BillingSettings
from staffing_billing.models.rates import RateInputs
from staffing_billing.models.records import Facility, Interpreter, Job
from staffing_billing.services.rate_resolver import (
    resolve_minimum_hours,
    resolve_rate_inputs,
)
from staffing_billing.utils.logging_utils import (
    LogContext,
    generate_correlation_id,
    log_function_call,
)
from staffing_billing.utils.numeric import round_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobTotals:
    """Totals persisted on the job record.

    Attributes:
        facility_hourly_total: Facility business + after-hours totals
        facility_billable_total: Full facility charge
        interpreter_hourly_total: Interpreter business + after-hours totals
        interpreter_billable_total: Full interpreter pay
    """

    facility_hourly_total: Decimal
    facility_billable_total: Decimal
    interpreter_hourly_total: Decimal
    interpreter_billable_total: Decimal

    @property
    def margin(self) -> Decimal:
        """Facility charge minus interpreter pay."""
        return self.facility_billable_total - self.interpreter_billable_total

    def to_record(self) -> Dict[str, Decimal]:
        """Return the column values to write back to the job row."""
        return {
            "facility_hourly_total": self.facility_hourly_total,
            "facility_billable_total": self.facility_billable_total,
            "interpreter_hourly_total": self.interpreter_hourly_total,
            "interpreter_billable_total": self.interpreter_billable_total,
        }


@dataclass(frozen=True)
class JobBilling:
    """Everything computed for a job in one pass.

    ``correlation_id`` is attached to every log line written during the run.
    """

    hours_split: HoursSplit
    rate_inputs: RateInputs
    billable_total: BillableTotal
    totals: JobTotals
    correlation_id: str


def project_job_totals(billable_total: BillableTotal) -> JobTotals:
    """Reduce a BillableTotal to the persisted job totals, rounded to cents.

    Example:
        >>> totals = project_job_totals(billable_total)
        >>> totals.to_record()["facility_billable_total"]
        Decimal('584.00')
    """
    return JobTotals(
        facility_hourly_total=round_currency(billable_total.facility.hourly_total),
        facility_billable_total=round_currency(billable_total.facility.total),
        interpreter_hourly_total=round_currency(
            billable_total.interpreter.hourly_total
        ),
        interpreter_billable_total=round_currency(billable_total.interpreter.total),
    )


@log_function_call
def calculate_job_billing(
    job: Job,
    facility: Optional[Facility],
    interpreter: Optional[Interpreter],
    settings: BillingSettings,
) -> JobBilling:
    """Calculate the hours split, rates and totals for a job.

    Args:
        job: Job record
        facility: The job's facility, if known
        interpreter: The assigned interpreter, if any
        settings: Billing defaults (mileage rate, minimum hours)

    Returns:
        JobBilling with all intermediate results

    Raises:
        InvalidTimeFormatError: If the job's start or end time is malformed
    """
    correlation_id = generate_correlation_id()
    with LogContext(job_number=job.job_number, correlation_id=correlation_id):
        minimum_hours = resolve_minimum_hours(facility, settings)
        hours_split = split_hours(job.start_time, job.end_time, minimum_hours)
        rate_inputs = resolve_rate_inputs(job, facility, interpreter, settings)
        billable_total = calculate_billable_total(hours_split, rate_inputs)
        totals = project_job_totals(billable_total)

        logger.info(
            f"Job {job.job_number or '(unnumbered)'}: facility "
            f"{totals.facility_billable_total}, interpreter "
            f"{totals.interpreter_billable_total}"
        )

    return JobBilling(
        hours_split=hours_split,
        rate_inputs=rate_inputs,
        billable_total=billable_total,
        totals=totals,
        correlation_id=correlation_id,
    )
