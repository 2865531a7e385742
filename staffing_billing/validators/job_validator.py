"""Job validator run before billing.

Coordinates field validation and billing rule checks for a job together
with its facility and interpreter records. The calculators themselves do
not range-check their inputs; this is where negative or malformed values
are caught.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ValidationError

from staffing_billing.calculators.hours_splitter import split_hours
from staffing_billing.calculators.time_utils import calculate_duration_minutes
from staffing_billing.config.settings import BillingSettings, get_config
from staffing_billing.models.records import Facility, Interpreter, Job
from staffing_billing.services.rate_resolver import (
    resolve_minimum_hours,
    resolve_rate_inputs,
)
from staffing_billing.validators.field_validators import FieldValidators
from staffing_billing.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

MIN_JOB_MINUTES = 2 * 60
MAX_JOB_MINUTES = 8 * 60

# Plausibility limits; exceeding them is a warning only
MAX_RATE_ADJUSTMENT = Decimal("100")
MAX_TRAVEL_TIME_HOURS = Decimal("8")

# Fields that must not be negative. Rate adjustments may be negative
# (a per-job discount) and are excluded.
_JOB_NON_NEGATIVE_FIELDS = (
    "facility_rate_business",
    "facility_rate_after_hours",
    "facility_rate_mileage",
    "interpreter_rate_business",
    "interpreter_rate_after_hours",
    "interpreter_rate_mileage",
    "trilingual_rate_uplift",
    "mileage",
    "travel_time_hours",
    "parking",
    "tolls",
    "misc_fee",
)
_RECORD_NON_NEGATIVE_FIELDS = {
    "facility": (
        "rate_business_hours",
        "rate_after_hours",
        "rate_mileage",
        "minimum_billable_hours",
    ),
    "interpreter": (
        "rate_business_hours",
        "rate_after_hours",
        "rate_mileage",
        "minimum_hours",
    ),
}


class JobValidator:
    """Validator for a job and the records it is billed against.

    Example:
        >>> validator = JobValidator(BillingSettings())
        >>> report = validator.validate(Job(start_time="9am", end_time="17:00"))
        >>> report.is_valid()
        False
    """

    def __init__(self, settings: Optional[BillingSettings] = None) -> None:
        self.settings = settings or get_config()

    def validate(
        self,
        job: Job,
        facility: Optional[Facility] = None,
        interpreter: Optional[Interpreter] = None,
    ) -> ValidationReport:
        """Validate a job ahead of billing.

        Args:
            job: The job to validate
            facility: The job's facility, if known
            interpreter: The assigned interpreter, if any

        Returns:
            ValidationReport with any issues found
        """
        report = ValidationReport()
        context = {"job": job.job_number} if job.job_number else None

        times_ok = self._validate_times(job, report, context)
        self._validate_amounts(job, facility, interpreter, report, context)

        if times_ok:
            self._validate_duration(job, report, context)
            self._check_minimum(job, facility, report, context)
        if report.is_valid():
            self._check_rates(job, facility, interpreter, report, context)

        if report.has_errors():
            logger.warning(f"Job validation failed: {report.summary()}")
        return report

    def validate_document(self, data: Mapping[str, Any]) -> ValidationReport:
        """Validate a raw ``{"job", "facility", "interpreter"}`` mapping.

        Model construction errors (missing times, non-numeric values) are
        reported as errors; if all records build, ``validate`` runs on them.
        """
        report = ValidationReport()
        models: Dict[str, Optional[BaseModel]] = {}

        for key, model_cls in (
            ("job", Job),
            ("facility", Facility),
            ("interpreter", Interpreter),
        ):
            raw = data.get(key)
            if raw is None:
                if key == "job":
                    report.add_error("job", "Job record is required", None)
                models[key] = None
                continue
            try:
                models[key] = model_cls.model_validate(raw)
            except ValidationError as e:
                models[key] = None
                for error in e.errors():
                    field = ".".join(str(part) for part in (key, *error["loc"]))
                    report.add_error(field, error["msg"], error.get("input"))

        if report.is_valid():
            report.merge(
                self.validate(models["job"], models["facility"], models["interpreter"])
            )
        return report

    def _validate_times(
        self, job: Job, report: ValidationReport, context: Optional[dict]
    ) -> bool:
        start_ok = FieldValidators.validate_time(
            job.start_time, "start_time", report, context
        )
        end_ok = FieldValidators.validate_time(job.end_time, "end_time", report, context)
        return start_ok and end_ok

    def _validate_duration(
        self, job: Job, report: ValidationReport, context: Optional[dict]
    ) -> None:
        minutes = calculate_duration_minutes(job.start_time, job.end_time)
        if minutes < MIN_JOB_MINUTES or minutes > MAX_JOB_MINUTES:
            report.add_warning(
                "end_time",
                "Job should be between 2 and 8 hours long",
                f"{job.start_time}-{job.end_time}",
                context,
            )

    def _validate_amounts(
        self,
        job: Job,
        facility: Optional[Facility],
        interpreter: Optional[Interpreter],
        report: ValidationReport,
        context: Optional[dict],
    ) -> None:
        for field in _JOB_NON_NEGATIVE_FIELDS:
            FieldValidators.validate_non_negative_number(
                getattr(job, field), field, report, context
            )
        for field in ("facility_rate_adjustment", "interpreter_rate_adjustment"):
            FieldValidators.validate_number_range(
                getattr(job, field),
                field,
                report,
                min_val=-MAX_RATE_ADJUSTMENT,
                max_val=MAX_RATE_ADJUSTMENT,
                context=context,
            )
        FieldValidators.validate_number_range(
            job.travel_time_hours,
            "travel_time_hours",
            report,
            max_val=MAX_TRAVEL_TIME_HOURS,
            context=context,
        )
        for prefix, record in (("facility", facility), ("interpreter", interpreter)):
            if record is None:
                continue
            for field in _RECORD_NON_NEGATIVE_FIELDS[prefix]:
                FieldValidators.validate_non_negative_number(
                    getattr(record, field), f"{prefix}.{field}", report, context
                )

    def _check_minimum(
        self,
        job: Job,
        facility: Optional[Facility],
        report: ValidationReport,
        context: Optional[dict],
    ) -> None:
        minimum = resolve_minimum_hours(facility, self.settings)
        if minimum < 0:
            return
        hours_split = split_hours(job.start_time, job.end_time, minimum)
        if hours_split.minimum_applied > 0:
            report.add_info(
                "billable_hours",
                f"{minimum}h minimum applies; {hours_split.minimum_applied}h "
                f"added to business hours",
                hours_split.total_hours,
                context,
            )

    def _check_rates(
        self,
        job: Job,
        facility: Optional[Facility],
        interpreter: Optional[Interpreter],
        report: ValidationReport,
        context: Optional[dict],
    ) -> None:
        rate_inputs = resolve_rate_inputs(job, facility, interpreter, self.settings)

        if rate_inputs.facility.business_rate == Decimal("0"):
            report.add_warning(
                "facility_rate_business",
                "Facility business rate is zero",
                rate_inputs.facility.business_rate,
                context,
            )
        if interpreter is None:
            report.add_info(
                "interpreter",
                "No interpreter assigned; interpreter totals use job rates only",
                None,
                context,
            )
        elif rate_inputs.interpreter.business_rate == Decimal("0"):
            report.add_warning(
                "interpreter_rate_business",
                "Interpreter business rate is zero",
                rate_inputs.interpreter.business_rate,
                context,
            )
