"""Unit tests for job, facility and interpreter record models."""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from staffing_billing.models.records import Facility, Interpreter, Job


class TestFacility:
    """Test facility record model."""

    def test_rates_converted(self, sample_facility):
        assert sample_facility.rate_business_hours == Decimal("65")
        assert sample_facility.rate_mileage == Decimal("0.65")
        assert sample_facility.minimum_billable_hours == Decimal("2")

    def test_missing_rates_are_none(self):
        facility = Facility(name="Valley Clinic")

        assert facility.rate_business_hours is None
        assert facility.minimum_billable_hours is None

    def test_unknown_columns_ignored(self):
        facility = Facility.model_validate(
            {"name": "Valley Clinic", "billing_address": "1 Main St", "id": 7}
        )
        assert facility.name == "Valley Clinic"

    def test_non_numeric_rate_rejected(self):
        with pytest.raises(ValidationError):
            Facility(rate_business_hours="sixty")


class TestInterpreter:
    """Test interpreter record model."""

    def test_full_name(self, sample_interpreter):
        assert sample_interpreter.full_name == "Ana Ruiz"

    def test_full_name_partial(self):
        assert Interpreter(first_name="Ana").full_name == "Ana"
        assert Interpreter().full_name == ""

    def test_blank_rate_is_none(self):
        assert Interpreter(rate_mileage="").rate_mileage is None


class TestJob:
    """Test job record model."""

    def test_sample_job(self, sample_job):
        assert sample_job.job_date == dt.date(2024, 3, 14)
        assert sample_job.mileage == Decimal("20")
        assert sample_job.facility_rate_business is None

    def test_times_normalized(self):
        job = Job(start_time="09:00:00", end_time="17:30:00.000")

        assert job.start_time == "09:00"
        assert job.end_time == "17:30"

    def test_time_object_normalized(self):
        job = Job(start_time=dt.time(9, 0), end_time=dt.time(17, 0))
        assert job.start_time == "09:00"

    def test_unusable_time_kept_for_validator(self):
        """Test that a malformed time is stored as-is so it can be reported."""
        job = Job(start_time=" 9am ", end_time="17:00")
        assert job.start_time == "9am"

    def test_trailing_text_kept_for_validator(self):
        job = Job(start_time="09:30xyz", end_time="17:00")
        assert job.start_time == "09:30xyz"

    def test_times_required(self):
        with pytest.raises(ValidationError):
            Job(start_time="09:00")

    def test_blank_amounts_are_none(self):
        job = Job(start_time="09:00", end_time="17:00", parking="", tolls=None)

        assert job.parking is None
        assert job.tolls is None

    def test_explicit_zero_kept(self):
        job = Job(start_time="09:00", end_time="17:00", facility_rate_business=0)
        assert job.facility_rate_business == Decimal("0")

    def test_negative_adjustment_allowed(self):
        job = Job(start_time="09:00", end_time="17:00", interpreter_rate_adjustment="-5")
        assert job.interpreter_rate_adjustment == Decimal("-5")

    def test_non_numeric_expense_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Job(start_time="09:00", end_time="17:00", mileage="twenty")

        assert exc_info.value.errors()[0]["loc"] == ("mileage",)

    def test_unknown_columns_ignored(self):
        job = Job.model_validate(
            {"start_time": "09:00", "end_time": "17:00", "status": "confirmed"}
        )
        assert not hasattr(job, "status")
