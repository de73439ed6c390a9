# pension_roster/plan_rules/enrollment.py
"""
Upcoming-enrollee selection for the quarterly pension report.

An employee without a pension plan is reported as an upcoming enrollee when
either of these holds:

- their service anniversary of ``min_service_years`` (3 by default) falls on
  or before the reference date, i.e. enrollment is already overdue, or
- their employment date itself falls inside the next calendar quarter.

Employees holding a plan are never reported, whatever its contents.

QuickStart::

    from datetime import date
    from pension_roster.data.sample import load_sample_roster
    from pension_roster.plan_rules.enrollment import upcoming_enrollees

    for emp in upcoming_enrollees(load_sample_roster(), date(2025, 11, 5)):
        print(emp.id, emp.employment_date)
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from pension_roster.config.models import EnrollmentRules
from pension_roster.schema.models import Employee, QuarterRange
from pension_roster.utils.date_utils import add_years, next_quarter_range

logger = logging.getLogger(__name__)


def is_upcoming_enrollee(
    employee: Employee,
    reference: date,
    window: QuarterRange,
    min_service_years: int = 3,
) -> bool:
    """Single-employee predicate behind :func:`upcoming_enrollees`."""
    if employee.is_enrolled:
        logger.debug(f"Skipping {employee.id} ({employee.full_name}): already enrolled in a pension plan")
        return False

    anniversary = add_years(employee.employment_date, min_service_years)
    if anniversary <= reference:
        logger.debug(
            f"Employee {employee.id} overdue: {min_service_years}y anniversary {anniversary} <= {reference}"
        )
        return True

    if window.contains(employee.employment_date):
        logger.debug(
            f"Employee {employee.id} hired {employee.employment_date} inside window {window}"
        )
        return True

    return False


def upcoming_enrollees(
    employees: Iterable[Employee],
    reference: date,
    cfg: Optional[EnrollmentRules] = None,
) -> List[Employee]:
    """
    Select employees expected to enroll in the quarter after ``reference``.

    Args:
        employees: The roster.
        reference: As-of date for the tenure check and the quarter computation.
        cfg: Enrollment rules; defaults to a three-year service threshold.

    Returns:
        Qualifying employees, most recently hired first. Employees hired on
        the same day are ordered by id.
    """
    cfg = cfg or EnrollmentRules()
    window = next_quarter_range(reference)
    employees = list(employees)

    selected = [
        emp
        for emp in employees
        if is_upcoming_enrollee(emp, reference, window, cfg.min_service_years)
    ]
    # Two stable passes: id ascending, then employment date descending
    selected.sort(key=lambda e: e.id)
    selected.sort(key=lambda e: e.employment_date, reverse=True)

    logger.info(
        f"{len(selected)} of {len(employees)} employees are upcoming enrollees "
        f"as of {reference} for {window.label} ({window})"
    )
    return selected
