"""Plan settings: time availability and block configuration."""
from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from skillplan.tools.time_utils import time_to_minutes


class Lunch(BaseModel):
    """Fixed lunch break inside the working window."""
    start: str  # "HH:MM"
    duration: int = Field(60, ge=1)  # minutes

    @field_validator('start')
    @classmethod
    def validate_start(cls, v: str) -> str:
        time_to_minutes(v)
        return v


class PlanSettings(BaseModel):
    """Time-availability configuration for schedule generation.

    Format checks live here. Ordering checks (end time after start time,
    end date not before start date) are left to the scheduler so that it
    reports them with its own errors.
    """
    mode: Literal["Daily", "Monthly"] = "Daily"
    daily_hours: Optional[float] = None  # Daily mode only
    start_date: Optional[date] = None  # Monthly mode only
    end_date: Optional[date] = None  # Monthly mode only
    start_time: str = "09:00"
    end_time: str = "17:00"
    work_block_mins: int = Field(50, ge=25)
    break_mins: int = Field(10, ge=0)
    lunch: Optional[Lunch] = None

    @field_validator('start_time', 'end_time')
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Ensure times parse as HH:MM."""
        time_to_minutes(v)
        return v

    @model_validator(mode='after')
    def check_mode_fields(self) -> "PlanSettings":
        """Require the fields each mode depends on."""
        if self.mode == "Daily" and (self.daily_hours is None or self.daily_hours <= 0):
            raise ValueError('daily_hours are required for Daily mode')
        if self.mode == "Monthly" and (self.start_date is None or self.end_date is None):
            raise ValueError('start_date and end_date are required for Monthly mode')
        return self
