"""Read the schedule against the wall clock: current activity, task status, progress."""
from datetime import datetime

from skillplan.models.plan_state import LiveStatus, PlanState
from skillplan.models.schedule import ScheduleBlock, ScheduleDay
from skillplan.models.settings import PlanSettings
from skillplan.tools.time_utils import time_to_minutes


def _seconds(hhmm: str) -> int:
    return time_to_minutes(hhmm) * 60


def _now_seconds(now: datetime) -> int:
    return now.hour * 3600 + now.minute * 60 + now.second


def current_station(state: PlanState, now: datetime) -> str:
    """Label of the block covering `now` on today's day ("Not Started" / "Day Ended" otherwise)."""
    if not state.schedule:
        return "Not Started"

    now_s = _now_seconds(now)
    if now_s < _seconds(state.settings.start_time):
        return "Not Started"

    day = state.find_day(now.date().isoformat())
    if day is not None:
        for block in day.blocks:
            if _seconds(block.start) <= now_s <= _seconds(block.end):
                return block.skill_name or block.type.capitalize()
    return "Day Ended"


def auto_complete(state: PlanState, now: datetime) -> int:
    """Mark today's work blocks that have already ended as completed."""
    day = state.find_day(now.date().isoformat())
    if day is None:
        return 0

    now_s = _now_seconds(now)
    marked = 0
    for block in day.blocks:
        if block.type == "work" and not block.completed and _seconds(block.end) <= now_s:
            block.completed = True
            marked += 1
    return marked


def refresh_live(state: PlanState, now: datetime) -> LiveStatus:
    """Auto-complete past work, then record the live snapshot on the state."""
    auto_complete(state, now)
    state.live = LiveStatus(
        time=now.strftime("%H:%M:%S"),
        date=now.date().isoformat(),
        current_station=current_station(state, now),
    )
    return state.live


def task_status(block: ScheduleBlock, day: ScheduleDay, now: datetime) -> str:
    """Status shown next to a work block; empty for other block types."""
    if block.type != "work":
        return ""
    if block.completed:
        return "Completed"

    today = now.date().isoformat()
    if day.date != today:
        return "Completed" if day.date < today else "Upcoming"

    now_s = _now_seconds(now)
    if now_s < _seconds(block.start):
        return "Upcoming"
    if now_s <= _seconds(block.end):
        return "In Progress"
    return "Completed"


def day_progress(settings: PlanSettings, now: datetime) -> float:
    """Percentage of today's working window already elapsed (0..100)."""
    start_s = _seconds(settings.start_time)
    total = _seconds(settings.end_time) - start_s
    elapsed = _now_seconds(now) - start_s

    if total <= 0 or elapsed < 0:
        return 0.0
    if elapsed > total:
        return 100.0
    return elapsed / total * 100
