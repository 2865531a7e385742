"""Rate input models for the billable total calculator.

``RateInputs`` gathers everything the calculator needs apart from the hours
split: each side's rates and the trip expenses shared by both sides.
Models are frozen so they can serve as memoization keys.
"""

from decimal import Decimal

from pydantic import ConfigDict, Field, field_validator

from staffing_billing.models.base import BaseDataModel, coerce_decimal


class SideRates(BaseDataModel):
    """Rates for one side of a job (facility or interpreter).

    Attributes:
        business_rate: Hourly rate for business hours
        after_hours_rate: Hourly rate for after hours
        mileage_rate: Dollars per mile, already resolved against defaults
        rate_adjustment: Flat $/hr added to both hourly rates for this job

    Example:
        >>> rates = SideRates(business_rate="65", rate_adjustment=5)
        >>> rates.adjusted_business_rate
        Decimal('70')
    """

    model_config = ConfigDict(frozen=True)

    business_rate: Decimal = Field(default=Decimal("0"))
    after_hours_rate: Decimal = Field(default=Decimal("0"))
    mileage_rate: Decimal = Field(default=Decimal("0"))
    rate_adjustment: Decimal = Field(default=Decimal("0"))

    @field_validator(
        "business_rate",
        "after_hours_rate",
        "mileage_rate",
        "rate_adjustment",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v) -> Decimal:
        """Convert numeric values to Decimal.

        Negative values are allowed; range checks belong to the form layer.
        """
        return coerce_decimal(v)

    @property
    def adjusted_business_rate(self) -> Decimal:
        return self.business_rate + self.rate_adjustment

    @property
    def adjusted_after_hours_rate(self) -> Decimal:
        return self.after_hours_rate + self.rate_adjustment


class RateInputs(BaseDataModel):
    """All rate and expense inputs for one billable total calculation.

    Attributes:
        facility: Facility-side rates (trilingual uplift already included)
        interpreter: Interpreter-side rates
        mileage: Miles driven, billed to the facility and paid to the interpreter
        travel_time_hours: Interpreter travel time, paid but not billed
        parking: Pass-through parking cost
        tolls: Pass-through toll cost
        misc_fee: Pass-through miscellaneous cost
    """

    model_config = ConfigDict(frozen=True)

    facility: SideRates = Field(default_factory=SideRates)
    interpreter: SideRates = Field(default_factory=SideRates)
    mileage: Decimal = Field(default=Decimal("0"))
    travel_time_hours: Decimal = Field(default=Decimal("0"))
    parking: Decimal = Field(default=Decimal("0"))
    tolls: Decimal = Field(default=Decimal("0"))
    misc_fee: Decimal = Field(default=Decimal("0"))

    @field_validator(
        "mileage",
        "travel_time_hours",
        "parking",
        "tolls",
        "misc_fee",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v) -> Decimal:
        """Convert numeric values to Decimal."""
        return coerce_decimal(v)

    @property
    def fees_total(self) -> Decimal:
        """Pass-through fees charged identically to both sides."""
        return self.parking + self.tolls + self.misc_fee
