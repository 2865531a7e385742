"""Validate job command."""

from pathlib import Path

import click

from staffing_billing.cli.commands.common import load_settings, read_job_document
from staffing_billing.cli.error_handlers import DataValidationError, with_error_handling
from staffing_billing.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_warning,
)
from staffing_billing.validators.job_validator import JobValidator
from staffing_billing.validators.validation_report import ValidationSeverity

_STYLES = {
    ValidationSeverity.ERROR: format_error,
    ValidationSeverity.WARNING: format_warning,
    ValidationSeverity.INFO: format_info,
}


@click.command(name="validate-job")
@click.argument(
    "job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    help="Minimum severity level to display (default: warning)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def validate_job(job_file: Path, severity: str, debug: bool):
    """Validate a job document before billing.

    Checks for:
    - Missing or malformed start and end times
    - Non-numeric or negative rates, expenses and minimums
    - Billing rule warnings (job length, zero rates, minimum floor)

    Returns non-zero exit code if errors are found.

    Example:
        billing-cli validate-job job-1042.json
        billing-cli validate-job job-1042.json --severity info
    """
    with with_error_handling(debug):
        click.echo(format_info(f"Validating {job_file.name}..."))
        severity_level = ValidationSeverity[severity.upper()]

        report = JobValidator(load_settings()).validate_document(
            read_job_document(job_file)
        )

        click.echo()
        click.echo("=" * 60)
        click.echo("Validation Summary")
        click.echo("=" * 60)
        click.echo(f"Errors:           {report.error_count}")
        click.echo(f"Warnings:         {report.warning_count}")
        click.echo(f"Info:             {report.info_count}")

        issues = report.get_issues(severity_level)
        if issues:
            click.echo()
            click.echo(f"Issues (showing {severity.upper()} and above):")
            click.echo("-" * 60)
            for issue in issues:
                click.echo(_STYLES[issue.severity](f"  {issue}"))

        click.echo()
        if report.has_errors():
            raise DataValidationError(
                f"Validation failed with {report.error_count} error(s)"
            )
        elif report.warning_count > 0:
            click.echo(
                format_warning(
                    f"Validation completed with {report.warning_count} warning(s)"
                )
            )
        else:
            click.echo(format_success("Validation passed! No issues found."))
