"""Field-level validators for job inputs.

This module provides validators for individual fields such as job times
and numeric rate, fee and hours values.
"""

from decimal import Decimal
from typing import Any, Optional

from staffing_billing.calculators.time_utils import parse_time_string
from staffing_billing.exceptions import InvalidTimeFormatError
from staffing_billing.utils.numeric import has_value, to_decimal
from staffing_billing.validators.validation_report import ValidationReport


class FieldValidators:
    """Collection of field-level validation methods.

    Every method records issues on the given report instead of raising.
    """

    @staticmethod
    def validate_time(
        value: Any,
        field_name: str,
        report: ValidationReport,
        context: Optional[dict] = None,
    ) -> bool:
        """Validate a job time (``HH:MM``).

        Args:
            value: The time value to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            context: Optional context for the issue

        Returns:
            True if the time is usable
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            report.add_error(field_name, "Time is required", value, context)
            return False

        try:
            parse_time_string(value)
        except InvalidTimeFormatError as e:
            report.add_error(field_name, str(e), value, context)
            return False
        return True

    @staticmethod
    def validate_non_negative_number(
        value: Any,
        field_name: str,
        report: ValidationReport,
        context: Optional[dict] = None,
        required: bool = False,
    ) -> None:
        """Validate that a number, if present, is not negative.

        Args:
            value: The numeric value to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            context: Optional context for the issue
            required: Report an error when the value is missing
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            if required:
                report.add_error(field_name, "Value is required", value, context)
            return

        if not has_value(value):
            report.add_error(field_name, "Expected a number", value, context)
            return

        if to_decimal(value) < 0:
            report.add_error(field_name, "Value cannot be negative", value, context)

    @staticmethod
    def validate_number_range(
        value: Any,
        field_name: str,
        report: ValidationReport,
        min_val: Optional[Decimal] = None,
        max_val: Optional[Decimal] = None,
        context: Optional[dict] = None,
    ) -> None:
        """Warn when a present number falls outside ``[min_val, max_val]``.

        Used for plausibility checks (e.g. unusually large adjustments),
        so out-of-range values are warnings rather than errors.
        """
        if not has_value(value):
            return

        number = to_decimal(value)
        if min_val is not None and number < min_val:
            report.add_warning(
                field_name, f"Value is below {min_val}", value, context
            )
        if max_val is not None and number > max_val:
            report.add_warning(
                field_name, f"Value is above {max_val}", value, context
            )
