"""
Tests for quarter window arithmetic.
"""
from datetime import date, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from pension_roster.utils.date_utils import add_years, next_quarter_range, quarter_index

pytestmark = pytest.mark.utils


def _every_day(year):
    d = date(year, 1, 1)
    while d.year == year:
        yield d
        d += timedelta(days=1)


@pytest.mark.parametrize(
    "reference, start, end",
    [
        (date(2025, 1, 17), date(2025, 4, 1), date(2025, 6, 30)),
        (date(2025, 11, 5), date(2026, 1, 1), date(2026, 3, 31)),
        (date(2025, 3, 31), date(2025, 4, 1), date(2025, 6, 30)),
        (date(2025, 4, 1), date(2025, 7, 1), date(2025, 9, 30)),
        (date(2025, 9, 30), date(2025, 10, 1), date(2025, 12, 31)),
        (date(2025, 10, 1), date(2026, 1, 1), date(2026, 3, 31)),
        (date(2025, 12, 31), date(2026, 1, 1), date(2026, 3, 31)),
    ],
)
def test_next_quarter_range_examples(reference, start, end):
    rng = next_quarter_range(reference)
    assert (rng.start, rng.end) == (start, end)


def test_first_quarter_of_leap_year():
    rng = next_quarter_range(date(2023, 12, 1))
    assert rng.start == date(2024, 1, 1)
    assert rng.end == date(2024, 3, 31)


@pytest.mark.parametrize("year", [2023, 2024])
def test_quarter_shape_holds_for_every_day(year):
    for d in _every_day(year):
        rng = next_quarter_range(d)
        assert rng.start.month in (1, 4, 7, 10)
        assert rng.start.day == 1
        assert rng.end == rng.start + relativedelta(months=3) - timedelta(days=1)
        # Next quarter always begins 1 to 4 months after the reference month
        months_ahead = (rng.start.year - d.year) * 12 + rng.start.month - d.month
        assert 1 <= months_ahead <= 3
        assert rng.start > d


def test_repeated_application_walks_consecutive_quarters():
    rng = next_quarter_range(date(2024, 2, 10))
    for _ in range(12):
        following = next_quarter_range(rng.start)
        assert following.start == rng.end + timedelta(days=1)
        # Any day inside the window gives the same successor
        assert next_quarter_range(rng.end) == following
        assert next_quarter_range(rng.start + timedelta(days=45)) == following
        rng = following


@pytest.mark.parametrize(
    "d, expected",
    [(date(2025, 1, 1), 0), (date(2025, 3, 31), 0), (date(2025, 4, 1), 1), (date(2025, 12, 31), 3)],
)
def test_quarter_index(d, expected):
    assert quarter_index(d) == expected


def test_add_years_clamps_leap_day():
    assert add_years(date(2020, 2, 29), 3) == date(2023, 2, 28)
    assert add_years(date(2021, 2, 28), 3) == date(2024, 2, 28)
    assert add_years(date(2022, 1, 1), 3) == date(2025, 1, 1)
