"""Allocate a single day's working window into work, break, lunch and buffer blocks."""
import logging
import uuid
from typing import Optional

from skillplan.models.schedule import ScheduleBlock
from skillplan.models.settings import PlanSettings
from skillplan.models.skill import Skill
from skillplan.tools.errors import InvalidWindowError
from skillplan.tools.time_utils import minutes_to_time, round_to_5, time_to_minutes


logger = logging.getLogger(__name__)


def working_window(settings: PlanSettings) -> tuple[int, int]:
    """
    Return (window_start, window_end) in minutes since midnight.

    Raises:
        InvalidWindowError: if the end time is not after the start time
    """
    window_start = time_to_minutes(settings.start_time)
    window_end = time_to_minutes(settings.end_time)
    if window_end <= window_start:
        raise InvalidWindowError("End time must be after start time.")
    return window_start, window_end


def lunch_interval(settings: PlanSettings) -> Optional[tuple[int, int]]:
    """Return (lunch_start, lunch_end) in minutes, or None without lunch."""
    if settings.lunch is None:
        return None
    lunch_start = time_to_minutes(settings.lunch.start)
    return lunch_start, lunch_start + settings.lunch.duration


def allocatable_minutes(settings: PlanSettings, window_start: int, window_end: int) -> float:
    """
    Minutes available for work on one day.

    Daily mode uses the configured daily hours regardless of window width;
    Monthly mode uses the window minus lunch.
    """
    if settings.mode == "Daily":
        return (settings.daily_hours or 0) * 60

    minutes = window_end - window_start
    if settings.lunch is not None:
        minutes -= settings.lunch.duration
    return minutes


def active_skills(skills: list[Skill], remaining: dict[str, float]) -> list[Skill]:
    """Skills that still have remaining minutes, in input order."""
    return [s for s in skills if remaining.get(s.id, 0) > 0]


def daily_targets(
    skills: list[Skill],
    allocatable: float,
    remaining: dict[str, float],
) -> dict[str, int]:
    """Split allocatable minutes across skills by priority weight, capped by what remains."""
    total_weight = sum(s.weight for s in skills)
    if total_weight == 0:
        return {}
    return {
        s.id: round_to_5(min(allocatable * s.weight / total_weight, remaining[s.id]))
        for s in skills
    }


def skill_queue(skills: list[Skill], day_index: int) -> list[Skill]:
    """
    Round-robin order for the day.

    Highest weight first (stable for ties); every day after the first is
    rotated left by one so the first slot of the morning changes hands.
    """
    queue = sorted(skills, key=lambda s: s.weight, reverse=True)
    if day_index > 0 and queue:
        queue = queue[1:] + queue[:1]
    return queue


def allocate_day(
    skills: list[Skill],
    settings: PlanSettings,
    remaining: dict[str, float],
    totals: dict[str, int],
    day_index: int = 0,
) -> Optional[list[ScheduleBlock]]:
    """
    Build the block list for one day.

    `remaining` and `totals` are updated in place with the work minutes
    assigned today. `skills` should already be filtered to active skills.

    Returns:
        Sorted, gapless blocks covering the working window, or None if the
        day has no allocatable time and should be skipped.

    Raises:
        InvalidWindowError: if the working window is empty
    """
    window_start, window_end = working_window(settings)
    allocatable = allocatable_minutes(settings, window_start, window_end)
    if allocatable <= 0:
        logger.debug("No allocatable time (%s min), skipping day", allocatable)
        return None

    targets = daily_targets(skills, allocatable, remaining)
    if not targets:
        return None
    left_today = sum(targets.values())

    queue = skill_queue(skills, day_index)
    lunch = lunch_interval(settings)
    blocks: list[ScheduleBlock] = []

    def assign(skill: Skill, start: int, minutes: int) -> None:
        nonlocal left_today
        blocks.append(_block("work", start, start + minutes, skill=skill))
        targets[skill.id] -= minutes
        left_today -= minutes
        remaining[skill.id] = max(0, remaining[skill.id] - minutes)
        totals[skill.id] = totals.get(skill.id, 0) + minutes

    current = window_start
    queue_index = 0

    while current < window_end and left_today > 0:
        if lunch and lunch[0] <= current < lunch[1]:
            if not blocks or blocks[-1].type != "lunch":
                blocks.append(_lunch_block(lunch, window_start, window_end))
            current = lunch[1]
            continue

        skill = queue[queue_index % len(queue)]
        queue_index += 1

        skill_left = targets[skill.id]
        if skill_left <= 0:
            if all(t <= 0 for t in targets.values()):
                break
            continue

        duration = min(settings.work_block_mins, skill_left)
        if lunch and current < lunch[0] < current + duration:
            duration = lunch[0] - current

        if current + duration > window_end:
            tail = min(round_to_5(window_end - current), window_end - current)
            if tail > 0:
                assign(skill, current, tail)
            break

        assign(skill, current, duration)
        current += duration

        if settings.break_mins > 0 and current + settings.break_mins <= window_end and left_today > 0:
            break_end = current + settings.break_mins
            if lunch and current < lunch[1] and lunch[0] < break_end:
                # never run into lunch; the loop emits it next
                break_end = max(current, lunch[0])
            if break_end > current:
                blocks.append(_block("break", current, break_end))
                current = break_end

    if lunch and not any(b.type == "lunch" for b in blocks):
        if window_start <= lunch[0] < window_end:
            blocks.append(_lunch_block(lunch, window_start, window_end))

    blocks.sort(key=lambda b: time_to_minutes(b.start))
    return fill_gaps(blocks, window_start, window_end)


def fill_gaps(blocks: list[ScheduleBlock], window_start: int, window_end: int) -> list[ScheduleBlock]:
    """Insert buffer blocks so the sorted blocks cover the window without gaps."""
    final_blocks = []
    last_end = window_start
    for block in blocks:
        block_start = time_to_minutes(block.start)
        if block_start > last_end:
            final_blocks.append(_block("buffer", last_end, block_start))
        final_blocks.append(block)
        last_end = time_to_minutes(block.end)

    if last_end < window_end:
        final_blocks.append(_block("buffer", last_end, window_end))
    return final_blocks


def _lunch_block(lunch: tuple[int, int], window_start: int, window_end: int) -> ScheduleBlock:
    """Lunch block clamped to the working window."""
    return _block("lunch", max(lunch[0], window_start), min(lunch[1], window_end))


def _block(block_type: str, start: int, end: int, skill: Optional[Skill] = None) -> ScheduleBlock:
    return ScheduleBlock(
        id=str(uuid.uuid4()),
        start=minutes_to_time(start),
        end=minutes_to_time(end),
        type=block_type,
        minutes=end - start,
        skill_id=skill.id if skill else None,
        skill_name=skill.name if skill else None,
        completed=False if skill else None,
    )
