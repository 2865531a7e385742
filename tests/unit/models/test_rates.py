"""Unit tests for rate input models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from staffing_billing.models.rates import RateInputs, SideRates


class TestSideRates:
    """Test per-side rate model."""

    def test_defaults_are_zero(self):
        rates = SideRates()

        assert rates.business_rate == Decimal("0")
        assert rates.after_hours_rate == Decimal("0")
        assert rates.mileage_rate == Decimal("0")
        assert rates.rate_adjustment == Decimal("0")

    def test_values_converted_to_decimal(self):
        rates = SideRates(business_rate="65.50", after_hours_rate=85, mileage_rate=0.7)

        assert rates.business_rate == Decimal("65.50")
        assert rates.after_hours_rate == Decimal("85")
        assert rates.mileage_rate == Decimal("0.7")

    def test_adjusted_rates(self):
        rates = SideRates(business_rate="65", after_hours_rate="85", rate_adjustment="5")

        assert rates.adjusted_business_rate == Decimal("70")
        assert rates.adjusted_after_hours_rate == Decimal("90")

    def test_negative_values_allowed(self):
        rates = SideRates(rate_adjustment="-10")
        assert rates.adjusted_business_rate == Decimal("-10")

    @pytest.mark.parametrize("value", ["abc", "", None, float("nan"), float("inf"), True])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError):
            SideRates(business_rate=value)

    def test_frozen(self):
        rates = SideRates(business_rate="65")
        with pytest.raises(ValidationError):
            rates.business_rate = Decimal("70")


class TestRateInputs:
    """Test the full calculator input model."""

    def test_defaults(self):
        inputs = RateInputs()

        assert inputs.facility == SideRates()
        assert inputs.interpreter == SideRates()
        assert inputs.mileage == Decimal("0")
        assert inputs.fees_total == Decimal("0")

    def test_nested_sides_from_dict(self):
        inputs = RateInputs.model_validate(
            {"facility": {"business_rate": "65"}, "interpreter": {"business_rate": 40}}
        )

        assert inputs.facility.business_rate == Decimal("65")
        assert inputs.interpreter.business_rate == Decimal("40")

    def test_fees_total(self):
        inputs = RateInputs(parking="12.50", tolls="3.25", misc_fee=4)
        assert inputs.fees_total == Decimal("19.75")

    def test_equal_inputs_hash_equal(self):
        """Test that equal inputs can share a memoization key."""
        first = RateInputs(facility=SideRates(business_rate="65"), mileage="20")
        second = RateInputs(facility=SideRates(business_rate=65), mileage=20)

        assert first == second
        assert hash(first) == hash(second)

    def test_nan_expense_rejected(self):
        with pytest.raises(ValidationError):
            RateInputs(mileage="NaN")
