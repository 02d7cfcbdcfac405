from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from datespan import Period

d1 = date(2024, 1, 1)
d2 = date(2024, 1, 2)
d3 = date(2024, 1, 3)
d4 = date(2024, 1, 4)


def test_create():
    with pytest.raises(ValueError, match="must be <= end"):
        Period(start=d2, end=d1)


def test_open_ended_by_default():
    period = Period(start=d1)
    assert period.end is None
    assert not period.is_bounded
    assert Period(start=d1, end=d1).is_bounded


def test_immutable():
    period = Period(start=d1, end=d2)
    with pytest.raises(FrozenInstanceError):
        period.end = d3  # type: ignore[misc]


def test_contains():
    period = Period(start=d1, end=d3)
    assert period.contains(d1)
    assert period.contains(d3)
    assert not period.contains(d4)
    assert Period(start=d1).contains(date(2099, 12, 31))


def test_intersects():
    assert Period(start=d1, end=d2).intersects(Period(start=d2, end=d3))
    assert not Period(start=d1, end=d2).intersects(Period(start=d3, end=d4))
    assert Period(start=d1).intersects(Period(start=d3, end=d4))


def test_within():
    assert Period(start=d2, end=d3).within(Period(start=d1, end=d4))
    assert Period(start=d2).within(Period(start=d1))
    assert not Period(start=d2).within(Period(start=d1, end=d4))
    assert Period(start=d1, end=d4).within(Period(start=d1, end=d4))


def test_str():
    assert str(Period(start=d1, end=d3)) == "Period(2024-01-01→2024-01-03, 3d)"
    assert str(Period(start=d1)) == "Period(2024-01-01→∞)"
    assert (
        str(Period(start=datetime(2024, 1, 1, 8), end=datetime(2024, 1, 1, 9)))
        == "Period(2024-01-01 08:00:00→2024-01-01 09:00:00)"
    )
