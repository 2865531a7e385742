"""Helpers shared by the CLI commands."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from staffing_billing.cli.error_handlers import ConfigurationError, DataValidationError
from staffing_billing.config.settings import BillingSettings, get_config
from staffing_billing.models.records import Facility, Interpreter, Job


def load_settings() -> BillingSettings:
    """Load settings, reporting bad environment values as a configuration error."""
    try:
        return get_config()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigurationError(
            f"Invalid settings: {fields or e}",
            recovery_hint="Check the environment variables and your .env file",
        ) from e


def read_job_document(path: Path) -> Dict[str, Any]:
    """Read a job document (``{"job", "facility", "interpreter"}``) from JSON.

    Numbers are parsed as Decimal so amounts keep their written precision.

    Raises:
        DataValidationError: If the file does not hold a JSON object
    """
    with open(path, encoding="utf-8") as f:
        document = json.load(f, parse_float=Decimal)

    if not isinstance(document, dict):
        raise DataValidationError(
            f"{path.name} must contain a JSON object",
            recovery_hint='Expected {"job": {...}, "facility": {...}, "interpreter": {...}}',
        )
    return document


def load_records(
    document: Dict[str, Any]
) -> Tuple[Job, Optional[Facility], Optional[Interpreter]]:
    """Build the job, facility and interpreter models from a job document."""
    facility = document.get("facility")
    interpreter = document.get("interpreter")
    return (
        Job.model_validate(document["job"]),
        Facility.model_validate(facility) if facility is not None else None,
        Interpreter.model_validate(interpreter) if interpreter is not None else None,
    )


def to_json(data: Any) -> str:
    """Serialize command output, writing Decimal values as strings."""
    return json.dumps(data, indent=2, default=str)
