"""CLI utility functions."""

from staffing_billing.cli.utils.formatters import (
    format_billable_breakdown,
    format_error,
    format_hours_split,
    format_info,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_billable_breakdown",
    "format_error",
    "format_hours_split",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
]
