from datetime import date

import pytest
from pydantic import ValidationError

from pension_roster.schema.models import QuarterRange

pytestmark = pytest.mark.utils


def test_contains_is_inclusive():
    q = QuarterRange(start=date(2025, 4, 1), end=date(2025, 6, 30))
    assert q.contains(date(2025, 4, 1))
    assert q.contains(date(2025, 6, 30))
    assert not q.contains(date(2025, 3, 31))
    assert not q.contains(date(2025, 7, 1))


def test_label_and_str():
    q = QuarterRange(start=date(2026, 10, 1), end=date(2026, 12, 31))
    assert q.label == "2026-Q4"
    assert str(q) == "2026-10-01 to 2026-12-31"


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2025, 2, 1), date(2025, 4, 30)),
        (date(2025, 4, 2), date(2025, 7, 1)),
        (date(2025, 4, 1), date(2025, 7, 1)),
    ],
)
def test_invalid_quarters_rejected(start, end):
    with pytest.raises(ValidationError):
        QuarterRange(start=start, end=end)
