# pension_roster/reporting/ranking.py

import logging
from typing import Iterable, List

from pension_roster.schema.models import Employee

logger = logging.getLogger(__name__)


def rank_by_salary(employees: Iterable[Employee]) -> List[Employee]:
    """
    Order employees by yearly salary, highest first.

    Equal salaries are ordered by last name using plain code-point comparison,
    so "Zeta" sorts before "adams". The sort is stable, so ranking an already
    ranked roster returns it unchanged.
    """
    ranked = sorted(employees, key=lambda e: e.last_name)
    ranked.sort(key=lambda e: e.yearly_salary, reverse=True)
    logger.debug(f"Ranked {len(ranked)} employees by yearly salary")
    return ranked
