"""Shared fixtures for scheduler tests."""
from datetime import date

import pytest

from skillplan.models.settings import Lunch, PlanSettings
from skillplan.models.skill import Skill
from skillplan.tools.time_utils import time_to_minutes


@pytest.fixture
def today() -> date:
    return date(2024, 3, 4)


@pytest.fixture
def daily_settings() -> PlanSettings:
    return PlanSettings(
        mode="Daily",
        daily_hours=4,
        start_time="09:00",
        end_time="17:00",
        work_block_mins=50,
        break_mins=10,
        lunch=None,
    )


@pytest.fixture
def monthly_settings() -> PlanSettings:
    return PlanSettings(
        mode="Monthly",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 7),
        start_time="09:00",
        end_time="17:00",
        work_block_mins=50,
        break_mins=10,
        lunch=Lunch(start="13:00", duration=60),
    )


@pytest.fixture
def skills() -> list[Skill]:
    return [
        Skill(id="py", name="Python", priority="High", est_hours=20),
        Skill(id="sql", name="SQL", priority="Medium", est_hours=6),
        Skill(id="3d", name="3D Modeling", priority="Low", est_hours=3),
    ]


def assert_partitions_window(blocks, start: str, end: str) -> None:
    """Blocks are contiguous, non-overlapping and cover [start, end) exactly."""
    assert blocks, "day has no blocks"
    assert blocks[0].start == start
    assert blocks[-1].end == end
    for prev, nxt in zip(blocks, blocks[1:]):
        assert prev.end == nxt.start
    for block in blocks:
        assert block.minutes == time_to_minutes(block.end) - time_to_minutes(block.start)
        assert block.minutes > 0
