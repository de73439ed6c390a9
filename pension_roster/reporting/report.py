# pension_roster/reporting/report.py
"""
Assembles the two roster report sections and renders them as text.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from logging_config import REPORT_LOGGER
from pension_roster.config.models import EnrollmentRules
from pension_roster.data.writers import render_json
from pension_roster.plan_rules.enrollment import upcoming_enrollees
from pension_roster.schema.models import Employee, QuarterRange
from pension_roster.utils.date_utils import next_quarter_range

from .ranking import rank_by_salary

logger = logging.getLogger(REPORT_LOGGER)

ALL_EMPLOYEES_HEADING = "=== All Employees (JSON) ==="


@dataclass(frozen=True)
class RosterReport:
    reference_date: date
    next_quarter: QuarterRange
    all_employees: List[Employee]
    upcoming_enrollees: List[Employee]

    @property
    def upcoming_heading(self) -> str:
        return f"=== Quarterly Upcoming Enrollees (from {self.next_quarter}) ==="


def build_report(
    employees: Iterable[Employee],
    reference: date,
    cfg: Optional[EnrollmentRules] = None,
) -> RosterReport:
    """Rank the roster by salary and pick the upcoming enrollees as of ``reference``."""
    employees = list(employees)
    logger.info(f"Building roster report for {len(employees)} employees as of {reference}")
    report = RosterReport(
        reference_date=reference,
        next_quarter=next_quarter_range(reference),
        all_employees=rank_by_salary(employees),
        upcoming_enrollees=upcoming_enrollees(employees, reference, cfg),
    )
    logger.info(
        f"Report ready: {len(report.upcoming_enrollees)} upcoming enrollees "
        f"for {report.next_quarter.label}"
    )
    return report


def format_report(report: RosterReport, indent: int = 2) -> str:
    return "\n".join(
        [
            ALL_EMPLOYEES_HEADING,
            render_json(report.all_employees, indent=indent),
            report.upcoming_heading,
            render_json(report.upcoming_enrollees, indent=indent),
        ]
    )
