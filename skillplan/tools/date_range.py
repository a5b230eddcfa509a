"""Expand plan settings into the ordered list of dates to schedule."""
from datetime import date, timedelta
from typing import Optional

from skillplan.models.settings import PlanSettings
from skillplan.tools.errors import InvalidRangeError


def dates_in_range(start: date, end: date) -> list[date]:
    """Every date from start to end inclusive. Empty if end < start."""
    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current += timedelta(days=1)
    return dates


def schedule_dates(settings: PlanSettings, today: Optional[date] = None) -> list[date]:
    """
    Dates the scheduler iterates over.

    Daily mode always yields just today, whatever start_date says.
    Monthly mode yields start_date..end_date.

    Raises:
        InvalidRangeError: if the Monthly range is missing or empty
    """
    if settings.mode == "Daily":
        return [today or date.today()]

    if settings.start_date is None or settings.end_date is None:
        raise InvalidRangeError("Start and end dates are required for Monthly mode.")

    dates = dates_in_range(settings.start_date, settings.end_date)
    if not dates:
        raise InvalidRangeError(
            "Date range is invalid. Please select a valid start and end date."
        )
    return dates
