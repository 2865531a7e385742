"""Output formatting utilities for CLI."""

from typing import List

import click

from staffing_billing.calculators.billable_calculator import BillableTotal, SideTotal
from staffing_billing.calculators.hours_splitter import HoursSplit
from staffing_billing.calculators.time_utils import format_duration
from staffing_billing.utils.numeric import format_currency, format_hours


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 80) -> str:
    """Format data as a table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 80)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    def render(cells: List[str]) -> str:
        padded = [
            f" {str(cell)[: col_widths[i]]:<{col_widths[i]}} "
            for i, cell in enumerate(cells[: len(col_widths)])
        ]
        return "|" + "|".join(padded) + "|"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)


def format_hours_split(hours_split: HoursSplit) -> str:
    """Render an hours split as a two-column table."""
    billable = format_hours(hours_split.billable_hours)
    if hours_split.minimum_applied > 0:
        billable += " (min)"

    rows = [
        ["Total", f"{format_hours(hours_split.total_hours)} "
         f"({format_duration(hours_split.total_hours)})"],
        ["Business", format_hours(hours_split.business_hours)],
        ["After hours", format_hours(hours_split.after_hours)],
        ["Minimum applied", format_hours(hours_split.minimum_applied)],
        ["Billable", billable],
        ["Type", hours_split.hours_type],
    ]
    return format_table(["Hours", "Value"], rows)


def _side_rows(side: SideTotal, hours_split: HoursSplit) -> List[List[str]]:
    return [
        [
            "Business hours",
            format_hours(hours_split.business_hours),
            format_currency(side.business_rate),
            format_currency(side.business_total),
        ],
        [
            "After hours",
            format_hours(hours_split.after_hours),
            format_currency(side.after_hours_rate),
            format_currency(side.after_hours_total),
        ],
    ]


def format_billable_breakdown(
    hours_split: HoursSplit, billable_total: BillableTotal
) -> str:
    """Render facility and interpreter line items side by side as tables."""
    headers = ["Line item", "Qty", "Rate", "Amount"]
    facility = billable_total.facility
    interpreter = billable_total.interpreter

    facility_rows = _side_rows(facility, hours_split) + [
        [
            "Mileage",
            str(billable_total.mileage),
            format_currency(facility.mileage_rate),
            format_currency(facility.mileage_total),
        ],
        ["Fees", "", "", format_currency(facility.fees_total)],
        ["Total", "", "", format_currency(facility.total)],
    ]
    interpreter_rows = _side_rows(interpreter, hours_split) + [
        [
            "Mileage",
            str(billable_total.mileage),
            format_currency(interpreter.mileage_rate),
            format_currency(interpreter.mileage_total),
        ],
        [
            "Travel time",
            format_hours(billable_total.travel_time_hours),
            format_currency(interpreter.travel_time_rate),
            format_currency(interpreter.travel_time_total),
        ],
        ["Fees", "", "", format_currency(interpreter.fees_total)],
        ["Total", "", "", format_currency(interpreter.total)],
    ]

    return "\n".join(
        [
            "Facility charge",
            format_table(headers, facility_rows),
            "",
            "Interpreter pay",
            format_table(headers, interpreter_rows),
        ]
    )
