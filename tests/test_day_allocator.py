"""Tests for skillplan.tools.day_allocator."""
from datetime import date

import pytest

from conftest import assert_partitions_window
from skillplan.models.settings import Lunch, PlanSettings
from skillplan.models.skill import Skill
from skillplan.tools.day_allocator import (
    allocatable_minutes,
    allocate_day,
    daily_targets,
    fill_gaps,
    skill_queue,
    working_window,
)
from skillplan.tools.errors import InvalidWindowError


def _work(blocks):
    return [b for b in blocks if b.type == "work"]


def test_working_window() -> None:
    settings = PlanSettings(daily_hours=1, start_time="08:30", end_time="12:00")
    assert working_window(settings) == (510, 720)


@pytest.mark.parametrize("end_time", ["09:00", "08:00"])
def test_working_window_rejects_empty_window(end_time: str) -> None:
    settings = PlanSettings(daily_hours=1, start_time="09:00", end_time=end_time)
    with pytest.raises(InvalidWindowError):
        working_window(settings)


def test_allocatable_daily_ignores_window_width() -> None:
    settings = PlanSettings(daily_hours=10, start_time="09:00", end_time="10:00",
                            lunch=Lunch(start="09:30", duration=15))
    assert allocatable_minutes(settings, 540, 600) == 600


def test_allocatable_monthly_subtracts_lunch(monthly_settings: PlanSettings) -> None:
    assert allocatable_minutes(monthly_settings, 540, 1020) == 420


def test_daily_targets_proportional_and_capped() -> None:
    skills = [
        Skill(id="a", name="A", priority="High", est_hours=10),
        Skill(id="b", name="B", priority="Low", est_hours=0.5),
    ]
    targets = daily_targets(skills, 240, {"a": 600, "b": 30})
    assert targets == {"a": 180, "b": 30}


def test_skill_queue_stable_sort_and_rotation() -> None:
    skills = [
        Skill(id="a", name="A", priority="Medium", est_hours=1),
        Skill(id="b", name="B", priority="High", est_hours=1),
        Skill(id="c", name="C", priority="Medium", est_hours=1),
    ]
    assert [s.id for s in skill_queue(skills, 0)] == ["b", "a", "c"]
    assert [s.id for s in skill_queue(skills, 1)] == ["a", "c", "b"]
    # rebuilt each day, so later days rotate by one as well
    assert [s.id for s in skill_queue(skills, 5)] == ["a", "c", "b"]


def test_three_to_one_split() -> None:
    skills = [
        Skill(id="hi", name="High skill", priority="High", est_hours=10),
        Skill(id="lo", name="Low skill", priority="Low", est_hours=10),
    ]
    settings = PlanSettings(mode="Daily", daily_hours=4, start_time="09:00", end_time="13:00",
                            work_block_mins=60, break_mins=0)
    remaining = {"hi": 600, "lo": 600}
    totals = {"hi": 0, "lo": 0}

    blocks = allocate_day(skills, settings, remaining, totals)

    assert [(b.start, b.skill_id) for b in blocks] == [
        ("09:00", "hi"), ("10:00", "lo"), ("11:00", "hi"), ("12:00", "hi"),
    ]
    assert totals == {"hi": 180, "lo": 60}
    assert remaining == {"hi": 420, "lo": 540}
    assert_partitions_window(blocks, "09:00", "13:00")


def test_rotated_day_starts_with_next_skill() -> None:
    skills = [
        Skill(id="hi", name="High skill", priority="High", est_hours=10),
        Skill(id="lo", name="Low skill", priority="Low", est_hours=10),
    ]
    settings = PlanSettings(mode="Daily", daily_hours=4, start_time="09:00", end_time="13:00",
                            work_block_mins=60, break_mins=0)
    blocks = allocate_day(skills, settings, {"hi": 600, "lo": 600}, {}, day_index=1)
    assert blocks[0].skill_id == "lo"


def test_breaks_follow_work_until_allocation_done() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=5)
    settings = PlanSettings(mode="Daily", daily_hours=2, start_time="09:00", end_time="17:00",
                            work_block_mins=50, break_mins=10)
    blocks = allocate_day([skill], settings, {"s": 300}, {})

    assert [(b.type, b.start, b.end) for b in blocks] == [
        ("work", "09:00", "09:50"),
        ("break", "09:50", "10:00"),
        ("work", "10:00", "10:50"),
        ("break", "10:50", "11:00"),
        ("work", "11:00", "11:20"),
        ("buffer", "11:20", "17:00"),
    ]
    assert all(b.completed is False for b in _work(blocks))
    assert all(b.completed is None for b in blocks if b.type != "work")


def test_work_and_breaks_never_overlap_lunch() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=100)
    settings = PlanSettings(mode="Monthly", start_date=date(2024, 1, 1), end_date=date(2024, 1, 1),
                            start_time="09:00", end_time="17:00", work_block_mins=50, break_mins=10,
                            lunch=Lunch(start="12:30", duration=60))
    blocks = allocate_day([skill], settings, {"s": 6000}, {})

    lunches = [b for b in blocks if b.type == "lunch"]
    assert [(b.start, b.end, b.minutes) for b in lunches] == [("12:30", "13:30", 60)]
    assert_partitions_window(blocks, "09:00", "17:00")
    assert any(b.type == "work" and b.end == "12:30" for b in blocks)


def test_lunch_before_window_is_clamped() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=5)
    settings = PlanSettings(mode="Daily", daily_hours=2, start_time="09:00", end_time="17:00",
                            lunch=Lunch(start="08:30", duration=60))
    blocks = allocate_day([skill], settings, {"s": 300}, {})

    assert (blocks[0].type, blocks[0].start, blocks[0].end) == ("lunch", "09:00", "09:30")
    assert_partitions_window(blocks, "09:00", "17:00")


def test_clipped_tail_stays_inside_window() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=5)
    settings = PlanSettings(mode="Daily", daily_hours=2, start_time="09:00", end_time="10:07",
                            work_block_mins=60, break_mins=0)
    totals = {}
    blocks = allocate_day([skill], settings, {"s": 300}, totals)

    assert [(b.type, b.start, b.end) for b in blocks] == [
        ("work", "09:00", "10:00"),
        ("work", "10:00", "10:05"),
        ("buffer", "10:05", "10:07"),
    ]
    assert totals == {"s": 65}


def test_remaining_minutes_floor_at_zero() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=0.9)  # 54 minutes, target rounds to 55
    settings = PlanSettings(mode="Daily", daily_hours=4, start_time="09:00", end_time="17:00")
    remaining = {"s": 54}
    totals = {}

    allocate_day([skill], settings, remaining, totals)

    assert remaining == {"s": 0}
    assert totals == {"s": 55}


def test_no_allocatable_time_skips_day() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=5)
    settings = PlanSettings(mode="Monthly", start_date=date(2024, 1, 1), end_date=date(2024, 1, 1),
                            start_time="12:00", end_time="13:00", lunch=Lunch(start="12:00", duration=60))
    remaining = {"s": 300}
    assert allocate_day([skill], settings, remaining, {}) is None
    assert remaining == {"s": 300}


def test_zero_targets_yield_only_buffer() -> None:
    skill = Skill(id="s", name="Tiny", priority="Low", est_hours=0.03)  # target rounds to 0
    settings = PlanSettings(mode="Daily", daily_hours=2, start_time="09:00", end_time="10:00")
    blocks = allocate_day([skill], settings, {"s": 1.8}, {})
    assert [(b.type, b.start, b.end) for b in blocks] == [("buffer", "09:00", "10:00")]


def test_fill_gaps_inserts_leading_inner_and_trailing_buffers() -> None:
    skill = Skill(id="s", name="Solo", priority="High", est_hours=5)
    settings = PlanSettings(mode="Daily", daily_hours=1, start_time="09:00", end_time="12:00",
                            work_block_mins=30, break_mins=0, lunch=Lunch(start="10:00", duration=30))
    blocks = allocate_day([skill], settings, {"s": 300}, {})
    # work is done by 10:00, so lunch is added after the loop
    assert [(b.type, b.start, b.end) for b in blocks] == [
        ("work", "09:00", "09:30"),
        ("work", "09:30", "10:00"),
        ("lunch", "10:00", "10:30"),
        ("buffer", "10:30", "12:00"),
    ]
    assert fill_gaps([], 540, 600)[0].minutes == 60
