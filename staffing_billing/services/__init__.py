"""Services that assemble calculator inputs from stored records."""

from staffing_billing.services.job_billing import (
    JobBilling,
    JobTotals,
    calculate_job_billing,
    project_job_totals,
)
from staffing_billing.services.rate_resolver import (
    resolve_facility_rates,
    resolve_interpreter_rates,
    resolve_mileage_rate,
    resolve_minimum_hours,
    resolve_rate_inputs,
)
from staffing_billing.services.recalculator import BillingRecalculator

__all__ = [
    "BillingRecalculator",
    "JobBilling",
    "JobTotals",
    "calculate_job_billing",
    "project_job_totals",
    "resolve_facility_rates",
    "resolve_interpreter_rates",
    "resolve_mileage_rate",
    "resolve_minimum_hours",
    "resolve_rate_inputs",
]
