"""Mutations on a saved plan: skill management, regeneration, completion toggles."""
import logging
from datetime import date
from typing import Callable, Optional

from skillplan.models.plan_state import PlanState
from skillplan.models.schedule import ScheduleDay, ScheduleResult
from skillplan.models.settings import PlanSettings
from skillplan.models.skill import Priority, Skill
from skillplan.tools.errors import DuplicateSkillError, NoSkillsError
from skillplan.tools.scheduler import generate_schedule


logger = logging.getLogger(__name__)


# Popular skills offered for one-click adding
POPULAR_SKILLS: list[dict] = [
    {"name": "Python", "priority": "High", "est_hours": 20},
    {"name": "Java", "priority": "High", "est_hours": 25},
    {"name": "C Programming", "priority": "Medium", "est_hours": 15},
    {"name": "C++", "priority": "Medium", "est_hours": 20},
    {"name": "SQL", "priority": "High", "est_hours": 10},
    {"name": "Aptitude", "priority": "Medium", "est_hours": 12},
    {"name": "3D Modeling", "priority": "Low", "est_hours": 18},
    {"name": "JavaScript", "priority": "High", "est_hours": 22},
    {"name": "React", "priority": "High", "est_hours": 16},
    {"name": "Node.js", "priority": "Medium", "est_hours": 14},
    {"name": "HTML/CSS", "priority": "Medium", "est_hours": 10},
    {"name": "Data Structures", "priority": "High", "est_hours": 30},
]


def add_skill(state: PlanState, name: str, priority: Priority, est_hours: float) -> Skill:
    """
    Append a new skill to the plan.

    Raises:
        DuplicateSkillError: a skill with the same name (case-insensitive) exists
        pydantic.ValidationError: empty name or non-positive hours
    """
    skill = Skill(name=name, priority=priority, est_hours=est_hours)
    if _has_skill_named(state, skill.name):
        raise DuplicateSkillError(skill.name)
    state.skills.append(skill)
    return skill


def remove_skill(state: PlanState, skill_id: str) -> bool:
    """Remove a skill by id. Returns False if no such skill."""
    before = len(state.skills)
    state.skills = [s for s in state.skills if s.id != skill_id]
    return len(state.skills) < before


def add_popular_skills(state: PlanState, names: Optional[list[str]] = None) -> list[Skill]:
    """Add catalogue skills (all, or only those named), skipping ones already present."""
    wanted = {n.lower() for n in names} if names else None
    added = []
    for entry in POPULAR_SKILLS:
        if wanted is not None and entry["name"].lower() not in wanted:
            continue
        if _has_skill_named(state, entry["name"]):
            continue
        added.append(add_skill(state, entry["name"], entry["priority"], entry["est_hours"]))
    return added


def generate_for_state(
    state: PlanState,
    settings: Optional[PlanSettings] = None,
    today: Optional[date] = None,
    progress_callback: Optional[Callable[[ScheduleDay], None]] = None,
) -> ScheduleResult:
    """
    Generate a schedule for the plan's skills and store it in the state.

    The state is only modified when generation succeeds.

    Raises:
        NoSkillsError: the plan has no skills
        ScheduleError: any scheduler failure
    """
    if not state.skills:
        raise NoSkillsError("Please add at least one skill to generate a schedule.")

    settings = settings or state.settings
    result = generate_schedule(state.skills, settings, today=today, progress_callback=progress_callback)

    state.settings = settings
    state.schedule = result.schedule
    state.summary = result.summary
    return result


def toggle_completion(state: PlanState, day_date: str, block_id: str) -> Optional[bool]:
    """Flip `completed` on a work block. Returns the new value, or None if not found."""
    day = state.find_day(day_date)
    if day is None:
        return None
    for block in day.blocks:
        if block.id == block_id and block.type == "work":
            block.completed = not block.completed
            return block.completed
    return None


def _has_skill_named(state: PlanState, name: str) -> bool:
    return any(s.name.lower() == name.lower() for s in state.skills)
