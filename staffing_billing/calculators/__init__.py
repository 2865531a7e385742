"""Calculator modules for the billing engine."""

from staffing_billing.calculators.billable_calculator import (
    BillableTotal,
    InterpreterTotal,
    SideTotal,
    calculate_billable_total,
    calculate_facility_total,
    calculate_interpreter_total,
    select_travel_time_rate,
)
from staffing_billing.calculators.hours_splitter import (
    HoursSplit,
    count_business_minutes,
    split_hours,
)
from staffing_billing.calculators.time_utils import (
    calculate_duration_minutes,
    convert_time_to_minutes,
    format_duration,
    minutes_to_decimal_hours,
    normalize_time_to_hhmm,
    parse_time_string,
)

__all__ = [
    # billable_calculator
    "BillableTotal",
    "InterpreterTotal",
    "SideTotal",
    "calculate_billable_total",
    "calculate_facility_total",
    "calculate_interpreter_total",
    "select_travel_time_rate",
    # hours_splitter
    "HoursSplit",
    "count_business_minutes",
    "split_hours",
    # time_utils
    "calculate_duration_minutes",
    "convert_time_to_minutes",
    "format_duration",
    "minutes_to_decimal_hours",
    "normalize_time_to_hhmm",
    "parse_time_string",
]
