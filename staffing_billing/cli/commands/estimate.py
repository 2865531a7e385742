"""Estimate command."""

from dataclasses import asdict
from pathlib import Path

import click

from staffing_billing.cli.commands.common import (
    load_records,
    load_settings,
    read_job_document,
    to_json,
)
from staffing_billing.cli.error_handlers import DataValidationError, with_error_handling
from staffing_billing.cli.utils.formatters import (
    format_billable_breakdown,
    format_hours_split,
    format_info,
    format_success,
    format_table,
    format_warning,
)
from staffing_billing.services.job_billing import calculate_job_billing
from staffing_billing.utils.numeric import format_currency
from staffing_billing.validators.job_validator import JobValidator


@click.command(name="estimate")
@click.argument(
    "job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def estimate(job_file: Path, as_json: bool, debug: bool):
    """Calculate facility charge and interpreter pay for a job.

    JOB_FILE is a JSON document with "job", "facility" and "interpreter"
    objects. The job is validated first; errors stop the estimate.

    Example:
        billing-cli estimate job-1042.json
        billing-cli estimate job-1042.json --json
    """
    with with_error_handling(debug):
        settings = load_settings()
        document = read_job_document(job_file)

        report = JobValidator(settings).validate_document(document)
        if report.has_errors():
            for issue in report.get_errors():
                click.echo(f"  {issue}")
            raise DataValidationError(
                f"{job_file.name}: {report.summary()}",
                recovery_hint=f"Run 'billing-cli validate-job {job_file}' for details",
            )

        job, facility, interpreter = load_records(document)
        billing = calculate_job_billing(job, facility, interpreter, settings)

        if as_json:
            click.echo(
                to_json(
                    {
                        "job_number": job.job_number,
                        "hours_split": asdict(billing.hours_split),
                        "billable_total": asdict(billing.billable_total),
                        "totals": billing.totals.to_record(),
                        "margin": billing.totals.margin,
                    }
                )
            )
            return

        for issue in report.get_warnings():
            click.echo(format_warning(f"{issue.field}: {issue.message}"))

        label = f"Job {job.job_number}" if job.job_number else "Job"
        if facility is not None and facility.name:
            label += f" at {facility.name}"
        if interpreter is not None and interpreter.full_name:
            label += f" ({interpreter.full_name})"
        click.echo(format_info(label))
        click.echo()
        click.echo(format_hours_split(billing.hours_split))
        click.echo()
        click.echo(format_billable_breakdown(billing.hours_split, billing.billable_total))
        click.echo()

        totals = billing.totals
        click.echo(
            format_table(
                ["Persisted total", "Amount"],
                [
                    [name, format_currency(value)]
                    for name, value in totals.to_record().items()
                ],
            )
        )
        click.echo()
        click.echo(format_success(f"Margin: {format_currency(totals.margin)}"))
