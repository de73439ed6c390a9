"""Value objects shared across the roster reports."""

from .models import Employee, PensionPlan, QuarterRange

__all__ = ["Employee", "PensionPlan", "QuarterRange"]
