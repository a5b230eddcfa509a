"""Generate a multi-day learning schedule and its per-skill summary."""
import logging
from datetime import date
from typing import Callable, Optional

from skillplan.models.schedule import ScheduleDay, ScheduleResult, ScheduleSummary
from skillplan.models.settings import PlanSettings
from skillplan.models.skill import Skill
from skillplan.tools.date_range import schedule_dates
from skillplan.tools.day_allocator import active_skills, allocate_day, working_window
from skillplan.tools.errors import EmptyScheduleError


logger = logging.getLogger(__name__)


def generate_schedule(
    skills: list[Skill],
    settings: PlanSettings,
    today: Optional[date] = None,
    progress_callback: Optional[Callable[[ScheduleDay], None]] = None,
) -> ScheduleResult:
    """
    Allocate time to skills across every scheduled date.

    Each skill's remaining minutes carry over from day to day, so a skill
    finished early drops out of later days. Generation stops as soon as no
    skill has time left.

    Args:
        skills: Skills in input order (summary keeps this order)
        settings: Validated plan settings
        today: Date used by Daily mode (defaults to date.today())
        progress_callback: Optional callback(day) invoked for each produced day

    Returns:
        ScheduleResult with schedule days and summary

    Raises:
        InvalidRangeError: Monthly range is empty
        InvalidWindowError: end time is not after start time
        EmptyScheduleError: no day produced any blocks
    """
    working_window(settings)
    dates = schedule_dates(settings, today=today)
    logger.info(f"Scheduling {len(skills)} skill(s) over {len(dates)} day(s) ({settings.mode} mode)")

    remaining: dict[str, float] = {s.id: s.est_hours * 60 for s in skills}
    totals: dict[str, int] = {s.id: 0 for s in skills}
    schedule: list[ScheduleDay] = []

    for day_date in dates:
        active = active_skills(skills, remaining)
        if not active:
            logger.info(f"All skills exhausted before {day_date.isoformat()}, stopping")
            break

        blocks = allocate_day(active, settings, remaining, totals, day_index=len(schedule))
        if blocks is None:
            logger.debug(f"Skipped {day_date.isoformat()}: no allocatable time")
            continue

        day = ScheduleDay(date=day_date.isoformat(), blocks=blocks)
        schedule.append(day)
        if progress_callback:
            progress_callback(day)

    if not schedule:
        raise EmptyScheduleError(
            "Could not generate any schedule. Check your settings. "
            "The available time might be too short."
        )

    summary = build_summary(skills, totals)
    logger.info(f"Generated {len(schedule)} day(s), {sum(totals.values())} work minutes total")
    return ScheduleResult(schedule=schedule, summary=summary)


def build_summary(skills: list[Skill], totals: dict[str, int]) -> list[ScheduleSummary]:
    """One entry per input skill, in input order, with its share of all work minutes."""
    grand_total = sum(totals.values())
    summary = []
    for skill in skills:
        minutes = totals.get(skill.id, 0)
        summary.append(ScheduleSummary(
            skill_id=skill.id,
            skill_name=skill.name,
            minutes=minutes,
            percent=(minutes / grand_total * 100) if grand_total > 0 else 0.0,
        ))
    return summary
