"""Validation for job inputs ahead of billing."""

from staffing_billing.validators.field_validators import FieldValidators
from staffing_billing.validators.job_validator import JobValidator
from staffing_billing.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "FieldValidators",
    "JobValidator",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
]
