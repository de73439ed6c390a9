import os
import sys
from datetime import date
from decimal import Decimal

import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pension_roster.schema.models import Employee, PensionPlan  # noqa: E402


# Define pytest markers for test categories
def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "config: mark a test as a config test")
    config.addinivalue_line("markers", "data: mark a test as a data loading/writing test")
    config.addinivalue_line("markers", "plan_rules: mark a test as a plan rules test")
    config.addinivalue_line("markers", "utils: mark a test as a utils test")


@pytest.fixture
def make_employee():
    """Factory for employees with sensible defaults."""

    def _make(emp_id=1, hired=date(2020, 1, 1), salary="50000", last="Doe", first="Jane", plan=None):
        return Employee(
            id=emp_id,
            first_name=first,
            last_name=last,
            employment_date=hired,
            yearly_salary=Decimal(salary),
            pension_plan=plan,
        )

    return _make


@pytest.fixture
def plan():
    return PensionPlan(plan_reference_number="PL0001")


@pytest.fixture
def clean_logging():
    """Let a test run setup_logging and detach its handlers afterwards."""
    from logging_config import reset_logging

    reset_logging()
    yield
    reset_logging()
