"""Plan state I/O: load, save, and reset the saved plan."""
import json
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from skillplan.models.plan_state import PlanState
from skillplan.models.settings import Lunch, PlanSettings


logger = logging.getLogger(__name__)


def default_state(today: Optional[date] = None) -> PlanState:
    """Fresh state: no skills, a 6-hour Daily plan, 09:00-17:00 with lunch at 13:00."""
    today = today or date.today()
    return PlanState(
        skills=[],
        settings=PlanSettings(
            mode="Daily",
            daily_hours=6,
            start_date=today,
            end_date=today + timedelta(days=29),
            start_time="09:00",
            end_time="17:00",
            work_block_mins=50,
            break_mins=10,
            lunch=Lunch(start="13:00", duration=60),
        ),
    )


def load_state(state_path: Path) -> Optional[PlanState]:
    """Load plan state from JSON file. Returns None if not found or invalid."""
    if not state_path.exists():
        return None

    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
        return PlanState(**data)
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        logger.warning("Error reading plan state %s: %s", state_path, e)
        return None


def save_state(state: PlanState, state_path: Path) -> None:
    """Save plan state to JSON file atomically (write temp then replace)."""
    state_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = state_path.with_suffix(".tmp")
    temp_path.write_text(state.model_dump_json(indent=2), encoding="utf-8")

    temp_path.replace(state_path)


def load_or_default(state_path: Path) -> PlanState:
    """Saved state if there is a readable one, else the defaults."""
    state = load_state(state_path)
    if state is None:
        logger.info(f"No saved plan at {state_path}, starting from defaults")
        return default_state()
    return state


def reset_state(state_path: Path, today: Optional[date] = None) -> PlanState:
    """Overwrite the saved state with the defaults and return them."""
    state = default_state(today)
    save_state(state, state_path)
    return state
