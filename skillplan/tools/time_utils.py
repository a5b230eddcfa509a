"""Conversions between "HH:MM" strings and minutes since midnight."""
import math

from skillplan.tools.errors import FormatError


def time_to_minutes(value: str) -> int:
    """
    Parse "HH:MM" into minutes since midnight (0..1439).

    Raises:
        FormatError: if the value is not two colon-separated integers in range
    """
    parts = value.split(":") if isinstance(value, str) else []
    if len(parts) != 2:
        raise FormatError(f"Invalid time format (HH:MM): {value!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise FormatError(f"Invalid time format (HH:MM): {value!r}") from None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise FormatError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Format minutes since midnight as zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def round_to_5(value: float) -> int:
    """Round to the nearest multiple of 5, halves rounding up."""
    return int(math.floor(value / 5 + 0.5)) * 5
