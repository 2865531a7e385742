"""Validation report for collecting and formatting job input issues."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single problem found in job inputs.

    Attributes:
        severity: The severity level of the issue
        field: The job/facility/interpreter field name
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g., job number)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects validation issues for a job before it is billed.

    Errors block billing; warnings and info messages are advisory.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("start_time", "Invalid time format", "9am")
        >>> report.add_warning("facility_rate_business", "Rate is zero", 0)
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 error(s), 1 warning(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings and info messages do not affect validity.
        """
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue of the given severity.

        Args:
            severity: Severity level
            field: The field name with the issue
            message: Human-readable description
            value: The value that caused the issue
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.add(ValidationSeverity.INFO, field, message, value, context)

    def get_issues(
        self, min_severity: ValidationSeverity = ValidationSeverity.INFO
    ) -> List[ValidationIssue]:
        """Return issues at or above ``min_severity``, most severe first."""
        selected = [i for i in self.issues if i.severity >= min_severity]
        return sorted(selected, key=lambda i: i.severity, reverse=True)

    def get_errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    def get_warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Summarize the report as counts per severity."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count > 0:
            parts.append(f"{self.info_count} info message(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the report for display, grouped by severity."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for severity, heading in (
            (ValidationSeverity.ERROR, "ERRORS"),
            (ValidationSeverity.WARNING, "WARNINGS"),
            (ValidationSeverity.INFO, "INFO"),
        ):
            grouped = [i for i in self.issues if i.severity == severity]
            if grouped:
                lines.append(f"\n{heading}:")
                lines.extend(f"  - {issue}" for issue in grouped)

        return "\n".join(lines)
