# pension_roster/data/sample.py
"""
Built-in roster used when no census file is supplied.
"""

from datetime import date
from decimal import Decimal
from typing import List

from pension_roster.schema.models import Employee, PensionPlan


def load_sample_roster() -> List[Employee]:
    return [
        Employee(
            id=1,
            first_name="Daniel",
            last_name="Agar",
            employment_date=date(2023, 1, 17),
            yearly_salary=Decimal("105945.50"),
            pension_plan=PensionPlan(
                plan_reference_number="EX1089",
                monthly_contribution=Decimal("100.00"),
            ),
        ),
        # No plan reference on record, so no active plan
        Employee(
            id=2,
            first_name="Benard",
            last_name="Shaw",
            employment_date=date(2022, 9, 3),
            yearly_salary=Decimal("197750.00"),
        ),
        Employee(
            id=3,
            first_name="Carly",
            last_name="Agar",
            employment_date=date(2014, 5, 16),
            yearly_salary=Decimal("842000.75"),
            pension_plan=PensionPlan(
                plan_reference_number="SM2307",
                enrollment_date=date(2017, 5, 17),
                monthly_contribution=Decimal("1555.50"),
            ),
        ),
        Employee(
            id=4,
            first_name="Wesley",
            last_name="Schneider",
            employment_date=date(2023, 7, 21),
            yearly_salary=Decimal("74500.00"),
        ),
        Employee(
            id=5,
            first_name="Anna",
            last_name="Wiltord",
            employment_date=date(2023, 3, 15),
            yearly_salary=Decimal("85750.00"),
        ),
        Employee(
            id=6,
            first_name="Yosef",
            last_name="Tesfalem",
            employment_date=date(2024, 10, 31),
            yearly_salary=Decimal("100000.00"),
        ),
    ]
