"""CLI commands."""

from staffing_billing.cli.commands.estimate import estimate
from staffing_billing.cli.commands.split_hours import split_hours_command
from staffing_billing.cli.commands.validate_job import validate_job

__all__ = ["estimate", "split_hours_command", "validate_job"]
