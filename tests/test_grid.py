import calendar as stdlib_calendar
from datetime import date, timedelta

import pytest

from event_grid.layout import (
    MAX_YEAR,
    MIN_YEAR,
    check_year_month,
    generate_visible_days,
    month_bounds,
    shift_month,
    visible_range,
)


def test_march_2025_starts_on_the_monday_before_the_first(march_2025_days):
    assert len(march_2025_days) == 42
    assert march_2025_days[0].date == date(2025, 2, 24)
    assert march_2025_days[0].is_current_month is False
    assert march_2025_days[5].date == date(2025, 3, 1)
    assert march_2025_days[5].day_of_month == 1
    assert march_2025_days[5].is_current_month is True
    assert visible_range(march_2025_days) == (date(2025, 2, 24), date(2025, 4, 6))


def test_month_starting_on_monday_has_no_leading_days():
    days = generate_visible_days(date(2025, 9, 17))
    assert days[0].date == date(2025, 9, 1)
    assert days[0].is_current_month


@pytest.mark.parametrize(
    "year, month",
    [(year, month) for year in (2023, 2024, 2025, 2026) for month in range(1, 13)] + [(2000, 2), (2100, 2)],
)
def test_grid_is_six_consecutive_weeks_with_one_current_month_run(year, month):
    days = generate_visible_days(date(year, month, 1))

    assert len(days) == 42
    assert days[0].date.weekday() == 0
    for previous, current in zip(days, days[1:]):
        assert current.date - previous.date == timedelta(days=1)

    flags = [day.is_current_month for day in days]
    first = flags.index(True)
    run = sum(flags)
    assert flags[first : first + run] == [True] * run
    assert run == stdlib_calendar.monthrange(year, month)[1]
    assert days[first].date == date(year, month, 1)


def test_anchor_day_within_month_is_irrelevant():
    assert generate_visible_days(date(2025, 3, 1)) == generate_visible_days(date(2025, 3, 31))


def test_month_helpers():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))
    assert shift_month(date(2025, 1, 15), -1) == date(2024, 12, 1)
    assert shift_month(date(2025, 12, 31), 1) == date(2026, 1, 1)
    assert shift_month(date(2025, 3, 9), 0) == date(2025, 3, 1)


@pytest.mark.parametrize("year, month", [(0, 1), (MIN_YEAR - 1, 12), (MAX_YEAR + 1, 1), (2025, 0), (2025, 13)])
def test_check_year_month_rejects_unrenderable_months(year, month):
    with pytest.raises(ValueError):
        check_year_month(year, month)


@pytest.mark.parametrize("year, month", [(MIN_YEAR, 1), (MAX_YEAR, 12)])
def test_outermost_supported_months_have_a_full_window(year, month):
    check_year_month(year, month)
    assert len(generate_visible_days(date(year, month, 1))) == 42
    assert shift_month(date(year, month, 1), 1) > date(year, month, 1)
