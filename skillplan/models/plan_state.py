"""Persisted application state: skills, settings, last schedule, live status."""
from typing import Optional

from pydantic import BaseModel, Field

from skillplan.models.schedule import ScheduleDay, ScheduleSummary
from skillplan.models.settings import PlanSettings
from skillplan.models.skill import Skill


class LiveStatus(BaseModel):
    """Wall-clock snapshot and what the schedule says is happening now."""
    time: str  # "HH:MM:SS"
    date: str  # "YYYY-MM-DD"
    current_station: str = "Not Started"


class PlanState(BaseModel):
    """Everything the CLIs load, mutate and save back."""
    version: int = 1
    skills: list[Skill] = Field(default_factory=list)
    settings: PlanSettings
    schedule: Optional[list[ScheduleDay]] = None
    summary: Optional[list[ScheduleSummary]] = None
    live: Optional[LiveStatus] = None

    def find_day(self, day_date: str) -> Optional[ScheduleDay]:
        for day in self.schedule or []:
            if day.date == day_date:
                return day
        return None
