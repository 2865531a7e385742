"""
Global pytest configuration and fixtures.
"""
import logging
import os
from decimal import Decimal
from typing import Any, Dict

import pytest

from staffing_billing.config import BillingSettings, reload_config
from staffing_billing.models import Facility, Interpreter, Job


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "DEFAULT_MILEAGE_RATE": "0.70",
        "DEFAULT_MINIMUM_HOURS": "2",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    for key in ("LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(key, raising=False)

    # Clear the global config to force reload with test values
    import staffing_billing.config.settings

    staffing_billing.config.settings._config = None

    yield test_env_vars

    staffing_billing.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> BillingSettings:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def isolated_logging():
    """Undo root logger changes made by configure_logging."""
    root_logger = logging.getLogger()
    level, handlers = root_logger.level, root_logger.handlers[:]

    yield root_logger

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def sample_facility() -> Facility:
    """Facility with a full set of default terms."""
    return Facility(
        name="Mercy General",
        rate_business_hours="65",
        rate_after_hours="85",
        rate_mileage="0.65",
        minimum_billable_hours="2",
    )


@pytest.fixture
def sample_interpreter() -> Interpreter:
    """Interpreter with default pay rates."""
    return Interpreter(
        first_name="Ana",
        last_name="Ruiz",
        rate_business_hours="40",
        rate_after_hours="55",
        rate_mileage="0.55",
    )


@pytest.fixture
def sample_job() -> Job:
    """A 09:00-17:00 job with trip expenses and no rate overrides."""
    return Job(
        job_number="J-1042",
        job_date="2024-03-14",
        start_time="09:00",
        end_time="17:00",
        mileage="20",
        travel_time_hours="1",
        parking="10",
    )


@pytest.fixture
def sample_job_document() -> Dict[str, Any]:
    """Raw job document as read by the CLI."""
    return {
        "job": {
            "job_number": "J-1042",
            "start_time": "09:00",
            "end_time": "17:00",
            "facility_rate_adjustment": 5,
            "mileage": 20,
            "parking": 10,
        },
        "facility": {
            "name": "Mercy General",
            "rate_business_hours": 65,
            "rate_after_hours": 85,
            "rate_mileage": 0.7,
        },
        "interpreter": {
            "first_name": "Ana",
            "last_name": "Ruiz",
            "rate_business_hours": 40,
            "rate_after_hours": 55,
        },
    }


@pytest.fixture
def expected_facility_total() -> Decimal:
    """Facility total for sample_job_document: 8h x $70 + 20mi x $0.70 + $10."""
    return Decimal("584")


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ["coverage.xml", ".coverage"]
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "cli: mark test as exercising the CLI")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "tests/unit/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
