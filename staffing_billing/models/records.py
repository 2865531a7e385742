"""Job, facility and interpreter record models.

These are reduced projections of the stored rows: only the fields that feed
rate resolution and the hours split. Unknown columns are ignored so a full
row can be passed straight in.
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from staffing_billing.calculators.time_utils import normalize_time_to_hhmm
from staffing_billing.models.base import BaseDataModel, coerce_optional_decimal


class Facility(BaseDataModel):
    """A client facility and its default billing terms.

    Attributes:
        name: Facility name
        rate_business_hours: Default business-hours rate
        rate_after_hours: Default after-hours rate
        rate_mileage: Default mileage rate, also the fallback for the interpreter side
        minimum_billable_hours: Minimum hours billed per job

    Example:
        >>> facility = Facility(name="Mercy General", rate_business_hours="65")
        >>> facility.rate_business_hours
        Decimal('65')
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Facility name")
    rate_business_hours: Optional[Decimal] = None
    rate_after_hours: Optional[Decimal] = None
    rate_mileage: Optional[Decimal] = None
    minimum_billable_hours: Optional[Decimal] = None

    @field_validator(
        "rate_business_hours",
        "rate_after_hours",
        "rate_mileage",
        "minimum_billable_hours",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Optional[Decimal]:
        """Convert numeric values to Decimal, blanks to None."""
        return coerce_optional_decimal(v)


class Interpreter(BaseDataModel):
    """An interpreter and their default pay rates.

    Attributes:
        first_name: First name
        last_name: Last name
        rate_business_hours: Default business-hours pay rate
        rate_after_hours: Default after-hours pay rate
        rate_mileage: Default mileage reimbursement rate
        minimum_hours: Interpreter's own minimum (informational)
    """

    model_config = ConfigDict(extra="ignore")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    rate_business_hours: Optional[Decimal] = None
    rate_after_hours: Optional[Decimal] = None
    rate_mileage: Optional[Decimal] = None
    minimum_hours: Optional[Decimal] = None

    @field_validator(
        "rate_business_hours",
        "rate_after_hours",
        "rate_mileage",
        "minimum_hours",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Optional[Decimal]:
        """Convert numeric values to Decimal, blanks to None."""
        return coerce_optional_decimal(v)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class Job(BaseDataModel):
    """A scheduled interpreting job.

    Rate fields on the job override the facility and interpreter defaults
    when set. Times are kept as strings; malformed times are reported by
    the validator and rejected by the hours splitter.

    Attributes:
        job_number: Human-readable job number
        job_date: Date of the job
        start_time: Start time, ``HH:MM``
        end_time: End time, ``HH:MM``; earlier than start means next day
        facility_rate_business: Job-level facility business rate
        facility_rate_after_hours: Job-level facility after-hours rate
        facility_rate_mileage: Job-level facility mileage rate
        facility_rate_adjustment: Flat $/hr added to facility rates
        interpreter_rate_business: Job-level interpreter business rate
        interpreter_rate_after_hours: Job-level interpreter after-hours rate
        interpreter_rate_mileage: Job-level interpreter mileage rate
        interpreter_rate_adjustment: Flat $/hr added to interpreter rates
        trilingual_rate_uplift: Flat $/hr added to facility rates only
        mileage: Miles driven
        travel_time_hours: Interpreter travel time
        parking: Parking cost
        tolls: Toll cost
        misc_fee: Miscellaneous cost

    Example:
        >>> job = Job(start_time="09:00:00", end_time="17:00", parking="")
        >>> job.start_time, job.parking
        ('09:00', None)
    """

    model_config = ConfigDict(extra="ignore")

    job_number: Optional[str] = None
    job_date: Optional[dt.date] = None
    start_time: str = Field(..., description="Job start time (HH:MM)")
    end_time: str = Field(..., description="Job end time (HH:MM)")

    facility_rate_business: Optional[Decimal] = None
    facility_rate_after_hours: Optional[Decimal] = None
    facility_rate_mileage: Optional[Decimal] = None
    facility_rate_adjustment: Optional[Decimal] = None
    interpreter_rate_business: Optional[Decimal] = None
    interpreter_rate_after_hours: Optional[Decimal] = None
    interpreter_rate_mileage: Optional[Decimal] = None
    interpreter_rate_adjustment: Optional[Decimal] = None
    trilingual_rate_uplift: Optional[Decimal] = None

    mileage: Optional[Decimal] = None
    travel_time_hours: Optional[Decimal] = None
    parking: Optional[Decimal] = None
    tolls: Optional[Decimal] = None
    misc_fee: Optional[Decimal] = None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def normalize_time(cls, v: Any) -> Any:
        """Drop seconds from stored times; leave unusable input for the validator."""
        normalized = normalize_time_to_hhmm(v)
        if normalized:
            return normalized
        return v.strip() if isinstance(v, str) else v

    @field_validator(
        "facility_rate_business",
        "facility_rate_after_hours",
        "facility_rate_mileage",
        "facility_rate_adjustment",
        "interpreter_rate_business",
        "interpreter_rate_after_hours",
        "interpreter_rate_mileage",
        "interpreter_rate_adjustment",
        "trilingual_rate_uplift",
        "mileage",
        "travel_time_hours",
        "parking",
        "tolls",
        "misc_fee",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Optional[Decimal]:
        """Convert numeric values to Decimal, blanks to None."""
        return coerce_optional_decimal(v)
