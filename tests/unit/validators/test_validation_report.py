"""Unit tests for validation report."""

from staffing_billing.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)


class TestValidationIssue:
    """Test ValidationIssue formatting."""

    def test_str_without_context(self):
        issue = ValidationIssue(
            ValidationSeverity.ERROR, "start_time", "Invalid time format", "9am"
        )
        assert str(issue) == "[ERROR] start_time: Invalid time format"

    def test_str_with_context(self):
        issue = ValidationIssue(
            ValidationSeverity.WARNING,
            "facility_rate_business",
            "Facility business rate is zero",
            0,
            context={"job": "J-1042"},
        )
        assert str(issue).endswith("(job=J-1042)")


class TestValidationReport:
    """Test ValidationReport aggregation."""

    def test_empty_report_is_valid(self):
        report = ValidationReport()

        assert report.is_valid()
        assert not report.has_errors()
        assert report.summary() == "No issues found"
        assert report.format() == "Validation successful - no issues found"

    def test_warnings_do_not_invalidate(self):
        report = ValidationReport()
        report.add_warning("end_time", "Job should be between 2 and 8 hours long", "x")
        report.add_info("billable_hours", "Minimum applies", 1)

        assert report.is_valid()
        assert report.warning_count == 1
        assert report.info_count == 1

    def test_error_invalidates(self):
        report = ValidationReport()
        report.add_error("parking", "Value cannot be negative", -5)

        assert not report.is_valid()
        assert report.has_errors()
        assert report.get_errors()[0].field == "parking"

    def test_summary(self):
        report = ValidationReport()
        report.add_error("start_time", "Invalid time format", "9am")
        report.add_warning("facility_rate_business", "Rate is zero", 0)

        assert report.summary() == "1 error(s), 1 warning(s)"

    def test_get_issues_filters_and_sorts(self):
        report = ValidationReport()
        report.add_info("a", "info", None)
        report.add_error("b", "error", None)
        report.add_warning("c", "warning", None)

        fields = [i.field for i in report.get_issues(ValidationSeverity.WARNING)]
        assert fields == ["b", "c"]
        assert len(report.get_issues()) == 3

    def test_merge(self):
        first = ValidationReport()
        first.add_error("a", "error", None)
        second = ValidationReport()
        second.add_warning("b", "warning", None)

        first.merge(second)

        assert first.error_count == 1
        assert first.warning_count == 1

    def test_format_groups_by_severity(self):
        report = ValidationReport()
        report.add_warning("end_time", "Too long", "09:00-20:00")
        report.add_error("start_time", "Invalid time format", "9am")

        text = report.format()

        assert text.startswith("Validation Report - 1 error(s), 1 warning(s)")
        assert text.index("ERRORS:") < text.index("WARNINGS:")
