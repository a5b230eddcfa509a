"""Skill model: a thing to learn, with a priority and an effort estimate."""
import uuid
from typing import Literal

from pydantic import BaseModel, Field, field_validator


Priority = Literal["High", "Medium", "Low"]

PRIORITY_WEIGHTS: dict[str, int] = {"High": 3, "Medium": 2, "Low": 1}


class Skill(BaseModel):
    """Single skill the learner wants time allocated to."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    priority: Priority = "Medium"
    est_hours: float  # total estimated effort, in hours

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip whitespace and reject empty names."""
        v = v.strip()
        if not v:
            raise ValueError('Skill name is required')
        return v

    @field_validator('est_hours')
    @classmethod
    def validate_est_hours(cls, v: float) -> float:
        """Ensure hours are positive."""
        if v <= 0:
            raise ValueError('est_hours must be positive')
        return v

    @property
    def weight(self) -> int:
        return PRIORITY_WEIGHTS[self.priority]
