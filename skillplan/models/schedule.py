"""Schedule output models: blocks, days and per-skill summary."""
from typing import Literal, Optional

from pydantic import BaseModel, Field


BlockType = Literal["work", "break", "lunch", "buffer"]


class ScheduleBlock(BaseModel):
    """Contiguous span of time within a day."""
    id: str
    start: str  # "HH:MM"
    end: str  # "HH:MM"
    type: BlockType
    minutes: int
    # work blocks only
    skill_id: Optional[str] = None
    skill_name: Optional[str] = None
    completed: Optional[bool] = None


class ScheduleDay(BaseModel):
    """All blocks for one calendar date, sorted by start time."""
    date: str  # "YYYY-MM-DD"
    blocks: list[ScheduleBlock] = Field(default_factory=list)

    def work_minutes(self, skill_id: Optional[str] = None) -> int:
        return sum(
            b.minutes for b in self.blocks
            if b.type == "work" and (skill_id is None or b.skill_id == skill_id)
        )


class ScheduleSummary(BaseModel):
    """Share of scheduled work time assigned to one skill."""
    skill_id: str
    skill_name: str
    minutes: int = 0
    percent: float = 0.0


class ScheduleResult(BaseModel):
    """Output of a single schedule generation."""
    schedule: list[ScheduleDay] = Field(default_factory=list)
    summary: list[ScheduleSummary] = Field(default_factory=list)
