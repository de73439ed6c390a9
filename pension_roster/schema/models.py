# pension_roster/schema/models.py
"""
Pydantic models for the employee roster and the quarter window it is
reported against. All models are frozen; a roster is loaded once and only
read afterwards.
"""

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import Optional

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from pension_roster.utils.columns import (
    EMP_EMPLOYMENT_DATE,
    EMP_FIRST_NAME,
    EMP_ID,
    EMP_LAST_NAME,
    EMP_PENSION_PLAN,
    EMP_YEARLY_SALARY,
    PLAN_ENROLLMENT_DATE,
    PLAN_MONTHLY_CONTRIBUTION,
    PLAN_REFERENCE_NUMBER,
)
from pension_roster.utils.decimal_helpers import to_money

QUARTER_START_MONTHS = (1, 4, 7, 10)


class PensionPlan(BaseModel):
    """An active pension plan. Its mere presence marks the holder as enrolled."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    plan_reference_number: str = Field(..., alias=PLAN_REFERENCE_NUMBER)
    enrollment_date: Optional[date] = Field(None, alias=PLAN_ENROLLMENT_DATE)
    monthly_contribution: Optional[Decimal] = Field(
        None, ge=0, alias=PLAN_MONTHLY_CONTRIBUTION
    )

    @field_validator("monthly_contribution")
    @classmethod
    def _quantize_contribution(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return None
        try:
            return to_money(v)
        except InvalidOperation as e:
            raise ValueError(f"monthly contribution {v} cannot be expressed in cents") from e

    @field_serializer("monthly_contribution", when_used="json")
    def _contribution_as_number(self, v: Optional[Decimal]) -> Optional[float]:
        return None if v is None else float(v)


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., alias=EMP_ID)
    first_name: str = Field(..., min_length=1, alias=EMP_FIRST_NAME)
    last_name: str = Field(..., min_length=1, alias=EMP_LAST_NAME)
    employment_date: date = Field(..., alias=EMP_EMPLOYMENT_DATE)
    yearly_salary: Decimal = Field(..., ge=0, alias=EMP_YEARLY_SALARY)
    pension_plan: Optional[PensionPlan] = Field(None, alias=EMP_PENSION_PLAN)

    @field_validator("yearly_salary")
    @classmethod
    def _quantize_salary(cls, v: Decimal) -> Decimal:
        try:
            return to_money(v)
        except InvalidOperation as e:
            raise ValueError(f"yearly salary {v} cannot be expressed in cents") from e

    @field_serializer("yearly_salary", when_used="json")
    def _salary_as_number(self, v: Decimal) -> float:
        return float(v)

    @property
    def is_enrolled(self) -> bool:
        return self.pension_plan is not None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class QuarterRange(BaseModel):
    """
    An inclusive calendar-quarter window.

    ``start`` is always the first day of January, April, July or October and
    ``end`` is the last day of the third month from ``start``.
    """

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode='after')
    def check_quarter_bounds(self) -> 'QuarterRange':
        if self.start.day != 1 or self.start.month not in QUARTER_START_MONTHS:
            raise ValueError(f"Quarter must start on the 1st of Jan/Apr/Jul/Oct, got {self.start}")
        expected_end = self.start + relativedelta(months=3) - timedelta(days=1)
        if self.end != expected_end:
            raise ValueError(f"Quarter starting {self.start} must end on {expected_end}, got {self.end}")
        return self

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def label(self) -> str:
        return f"{self.start.year}-Q{(self.start.month - 1) // 3 + 1}"

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"
