"""Tests for skillplan.tools.date_range."""
from datetime import date

import pytest

from skillplan.models.settings import PlanSettings
from skillplan.tools.date_range import dates_in_range, schedule_dates
from skillplan.tools.errors import InvalidRangeError


def test_dates_in_range_inclusive() -> None:
    dates = dates_in_range(date(2024, 2, 27), date(2024, 3, 1))
    assert dates == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_dates_in_range_empty_when_reversed() -> None:
    assert dates_in_range(date(2024, 3, 2), date(2024, 3, 1)) == []


def test_daily_mode_uses_today_not_start_date() -> None:
    settings = PlanSettings(mode="Daily", daily_hours=2, start_date=date(2020, 1, 1), end_date=date(2020, 1, 5))
    assert schedule_dates(settings, today=date(2024, 6, 1)) == [date(2024, 6, 1)]


def test_daily_mode_defaults_to_system_date() -> None:
    settings = PlanSettings(mode="Daily", daily_hours=2)
    assert schedule_dates(settings) == [date.today()]


def test_monthly_mode_single_day() -> None:
    settings = PlanSettings(mode="Monthly", start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    assert schedule_dates(settings) == [date(2024, 1, 1)]


def test_monthly_mode_reversed_range_raises() -> None:
    settings = PlanSettings(mode="Monthly", start_date=date(2024, 1, 5), end_date=date(2024, 1, 1))
    with pytest.raises(InvalidRangeError):
        schedule_dates(settings)
