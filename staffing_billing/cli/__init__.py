"""Billing engine CLI.

This module provides a command-line interface for the billing engine.
It includes commands for splitting job hours, estimating a job's charge
and pay, and validating job documents.
"""

import click

from staffing_billing import __version__
from staffing_billing.cli.commands.common import load_settings
from staffing_billing.cli.commands.estimate import estimate
from staffing_billing.cli.commands.split_hours import split_hours_command
from staffing_billing.cli.commands.validate_job import validate_job
from staffing_billing.cli.error_handlers import with_error_handling
from staffing_billing.config.logging_config import LoggingConfig, configure_logging


@click.group(
    help="Staffing Billing CLI - Split job hours and calculate facility and "
    "interpreter totals"
)
@click.version_option(version=__version__)
def cli():
    """Staffing Billing CLI main entry point."""
    pass


# Register commands
cli.add_command(split_hours_command)
cli.add_command(estimate)
cli.add_command(validate_job)


def main():
    """Main entry point for the CLI.

    Logging follows LOG_LEVEL, DEBUG, LOG_FORMAT and LOG_FILE; invalid
    settings exit with the configuration error code before any command runs.
    """
    with with_error_handling():
        configure_logging(LoggingConfig.from_settings(load_settings()))
    cli()


if __name__ == "__main__":
    main()
