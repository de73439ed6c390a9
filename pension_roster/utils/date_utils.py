# pension_roster/utils/date_utils.py

"""Calendar arithmetic for quarter windows and service anniversaries."""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from pension_roster.schema.models import QuarterRange


def quarter_index(d: date) -> int:
    """Zero-based calendar quarter of ``d`` (0 for Jan-Mar ... 3 for Oct-Dec)."""
    return (d.month - 1) // 3


def add_years(d: date, years: int) -> date:
    """
    Shift ``d`` by whole calendar years.

    February 29th lands on February 28th when the target year is not a leap year.
    """
    return d + relativedelta(years=years)


def next_quarter_range(reference: date) -> QuarterRange:
    """
    Compute the calendar quarter that follows the one containing ``reference``.

    Examples:
        >>> str(next_quarter_range(date(2025, 1, 17)))
        '2025-04-01 to 2025-06-30'
        >>> str(next_quarter_range(date(2025, 11, 5)))
        '2026-01-01 to 2026-03-31'
    """
    month = reference.month
    next_index = (quarter_index(reference) + 1) % 4
    start_month = next_index * 3 + 1
    # A start month at or before the reference month means we wrapped past Q4
    start_year = reference.year + 1 if start_month <= month else reference.year
    start = date(start_year, start_month, 1)
    end = start + relativedelta(months=3) - timedelta(days=1)
    return QuarterRange(start=start, end=end)
