"""Unit tests for the billable total calculator.

This module tests the facility charge and interpreter pay breakdowns
computed from an hours split and rate inputs.
"""

from decimal import Decimal

import pytest

from staffing_billing.calculators.billable_calculator import (
    calculate_billable_total,
    calculate_facility_total,
    calculate_interpreter_total,
    select_travel_time_rate,
)
from staffing_billing.calculators.hours_splitter import split_hours
from staffing_billing.models.rates import RateInputs, SideRates


@pytest.fixture
def mixed_split():
    """16:00-19:00: 1 business hour, 2 after hours."""
    return split_hours("16:00", "19:00", 2)


@pytest.fixture
def rate_inputs():
    return RateInputs(
        facility=SideRates(
            business_rate="65",
            after_hours_rate="85",
            mileage_rate="0.70",
            rate_adjustment="5",
        ),
        interpreter=SideRates(
            business_rate="40",
            after_hours_rate="55",
            mileage_rate="0.55",
            rate_adjustment="-2",
        ),
        mileage="30",
        travel_time_hours="1.5",
        parking="12.50",
        tolls="3.25",
        misc_fee="4",
    )


class TestFacilityTotal:
    """Test the facility side of the breakdown."""

    def test_documented_example(self):
        """Test 8h x (65+5) + 20mi x 0.70 + 10 parking = 584."""
        total = calculate_billable_total(
            split_hours("09:00", "17:00", 2),
            RateInputs(
                facility=SideRates(
                    business_rate=65, rate_adjustment=5, mileage_rate="0.7"
                ),
                mileage=20,
                parking=10,
            ),
        )

        assert total.facility.business_total == Decimal("560")
        assert total.facility.mileage_total == Decimal("14")
        assert total.facility.fees_total == Decimal("10")
        assert total.facility.total == Decimal("584")

    def test_line_items(self, mixed_split, rate_inputs):
        facility = calculate_facility_total(mixed_split, rate_inputs)

        assert facility.business_rate == Decimal("70")
        assert facility.after_hours_rate == Decimal("90")
        assert facility.business_total == Decimal("70")
        assert facility.after_hours_total == Decimal("180")
        assert facility.mileage_total == Decimal("21.00")
        assert facility.fees_total == Decimal("19.75")
        assert facility.total == Decimal("290.75")
        assert facility.hourly_total == Decimal("250")

    def test_no_travel_time_billed(self, mixed_split, rate_inputs):
        """Test that travel time never reaches the facility total."""
        without_travel = rate_inputs.model_copy(update={"travel_time_hours": Decimal("0")})

        with_travel_total = calculate_facility_total(mixed_split, rate_inputs).total
        without_travel_total = calculate_facility_total(mixed_split, without_travel).total

        assert with_travel_total == without_travel_total
        assert not hasattr(calculate_facility_total(mixed_split, rate_inputs), "travel_time_total")

    def test_minimum_top_up_billed_at_business_rate(self, rate_inputs):
        """Test that a 1h after-hours job bills the 1h shortfall at business rate."""
        facility = calculate_facility_total(split_hours("20:00", "21:00", 2), rate_inputs)

        assert facility.business_total == Decimal("70")
        assert facility.after_hours_total == Decimal("90")


class TestInterpreterTotal:
    """Test the interpreter side of the breakdown."""

    def test_line_items(self, mixed_split, rate_inputs):
        interpreter = calculate_interpreter_total(mixed_split, rate_inputs)

        assert interpreter.business_rate == Decimal("38")
        assert interpreter.after_hours_rate == Decimal("53")
        assert interpreter.business_total == Decimal("38")
        assert interpreter.after_hours_total == Decimal("106")
        assert interpreter.mileage_total == Decimal("16.50")
        # After hours dominate, so travel time is paid at the after-hours rate
        assert interpreter.travel_time_rate == Decimal("53")
        assert interpreter.travel_time_total == Decimal("79.5")
        assert interpreter.fees_total == Decimal("19.75")
        assert interpreter.total == Decimal("259.75")

    def test_uses_own_mileage_rate(self, mixed_split, rate_inputs):
        total = calculate_billable_total(mixed_split, rate_inputs)
        assert total.facility.mileage_rate != total.interpreter.mileage_rate

    def test_negative_adjustment_passes_through(self, mixed_split):
        """Test that a negative adjustment reduces the rate without clamping."""
        rates = RateInputs(
            interpreter=SideRates(business_rate="10", rate_adjustment="-15")
        )
        interpreter = calculate_interpreter_total(mixed_split, rates)
        assert interpreter.business_total == Decimal("-5")


class TestTravelTimeRate:
    """Test which rate travel time is paid at."""

    def test_business_dominant(self):
        rates = SideRates(business_rate="40", after_hours_rate="55")
        assert select_travel_time_rate(split_hours("09:00", "17:00"), rates) == Decimal("40")

    def test_after_hours_dominant(self):
        rates = SideRates(business_rate="40", after_hours_rate="55")
        assert select_travel_time_rate(split_hours("18:00", "23:00"), rates) == Decimal("55")

    def test_tie_goes_to_business_rate(self):
        """Test that an evenly split job (04:00-12:00) uses the business rate."""
        split = split_hours("04:00", "12:00", 2)
        assert split.business_hours == split.after_hours

        rates = SideRates(business_rate="40", after_hours_rate="55", rate_adjustment="2")
        assert select_travel_time_rate(split, rates) == Decimal("42")

    def test_minimum_top_up_counts_toward_business(self):
        """Test that the folded-in minimum can make business hours dominant."""
        split = split_hours("20:00", "20:30", 2)
        rates = SideRates(business_rate="40", after_hours_rate="55")

        assert split.business_hours > split.after_hours
        assert select_travel_time_rate(split, rates) == Decimal("40")


class TestBillableTotalProperties:
    """Test properties of the full breakdown."""

    def test_additivity(self, mixed_split, rate_inputs):
        total = calculate_billable_total(mixed_split, rate_inputs)
        facility, interpreter = total.facility, total.interpreter

        assert facility.total == (
            facility.business_total
            + facility.after_hours_total
            + facility.mileage_total
            + facility.fees_total
        )
        assert interpreter.total == (
            interpreter.business_total
            + interpreter.after_hours_total
            + interpreter.mileage_total
            + interpreter.travel_time_total
            + interpreter.fees_total
        )

    @pytest.mark.parametrize("delta", ["1", "7.25", "-3"])
    def test_rate_adjustment_linearity(self, mixed_split, rate_inputs, delta):
        delta = Decimal(delta)
        adjusted = rate_inputs.model_copy(
            update={
                "facility": rate_inputs.facility.model_copy(
                    update={"rate_adjustment": rate_inputs.facility.rate_adjustment + delta}
                )
            }
        )

        before = calculate_facility_total(mixed_split, rate_inputs)
        after = calculate_facility_total(mixed_split, adjusted)

        assert after.business_total - before.business_total == (
            mixed_split.business_hours * delta
        )
        assert after.after_hours_total - before.after_hours_total == (
            mixed_split.after_hours * delta
        )

    def test_fees_identical_on_both_sides(self, mixed_split, rate_inputs):
        total = calculate_billable_total(mixed_split, rate_inputs)
        assert total.facility.fees_total == total.interpreter.fees_total

    def test_echoes_expense_inputs(self, mixed_split, rate_inputs):
        total = calculate_billable_total(mixed_split, rate_inputs)

        assert total.mileage == Decimal("30")
        assert total.travel_time_hours == Decimal("1.5")
        assert total.parking == Decimal("12.50")
        assert total.tolls == Decimal("3.25")
        assert total.misc_fee == Decimal("4")

    def test_all_zero_inputs(self, mixed_split):
        total = calculate_billable_total(mixed_split, RateInputs())

        assert total.facility.total == Decimal("0")
        assert total.interpreter.total == Decimal("0")
