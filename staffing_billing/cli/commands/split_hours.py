"""Split hours command."""

from dataclasses import asdict
from typing import Optional

import click

from staffing_billing.calculators.hours_splitter import split_hours
from staffing_billing.cli.commands.common import load_settings, to_json
from staffing_billing.cli.error_handlers import DataValidationError, with_error_handling
from staffing_billing.cli.utils.formatters import format_hours_split, format_info
from staffing_billing.utils.numeric import to_decimal


@click.command(name="split-hours")
@click.option("--start", "start_time", required=True, help="Job start time (HH:MM)")
@click.option(
    "--end",
    "end_time",
    required=True,
    help="Job end time (HH:MM); earlier than --start means the next day",
)
@click.option(
    "--minimum",
    type=str,
    default=None,
    help="Minimum billable hours (default: DEFAULT_MINIMUM_HOURS setting)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the split as JSON")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def split_hours_command(
    start_time: str, end_time: str, minimum: Optional[str], as_json: bool, debug: bool
):
    """Split a job into business and after hours.

    Business hours run 08:00-17:00. Any shortfall below the minimum is
    added to business hours.

    Example:
        billing-cli split-hours --start 16:00 --end 19:00
        billing-cli split-hours --start 22:00 --end 02:00 --minimum 3 --json
    """
    with with_error_handling(debug):
        if minimum is None:
            minimum_hours = load_settings().default_minimum_hours
        else:
            minimum_hours = to_decimal(minimum)
        if minimum_hours < 0:
            raise DataValidationError(
                f"Minimum hours cannot be negative, got {minimum_hours}"
            )

        hours_split = split_hours(start_time, end_time, minimum_hours)

        if as_json:
            click.echo(to_json(asdict(hours_split)))
            return

        click.echo(format_info(f"Job {start_time}-{end_time}, {minimum_hours}h minimum"))
        click.echo(format_hours_split(hours_split))
