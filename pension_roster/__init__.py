from pension_roster.plan_rules.enrollment import upcoming_enrollees
from pension_roster.reporting.ranking import rank_by_salary
from pension_roster.schema.models import Employee, PensionPlan, QuarterRange
from pension_roster.utils.date_utils import next_quarter_range

__all__ = [
    'Employee',
    'PensionPlan',
    'QuarterRange',
    'next_quarter_range',
    'rank_by_salary',
    'upcoming_enrollees',
]
