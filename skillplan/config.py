"""Project paths and environment-driven defaults.

Call load_dotenv() before reading these so a local .env can override them.
"""
import os
from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent
STATE_DIR = PROJECT_ROOT / "storage" / "state"


def state_path() -> Path:
    """Path of the saved plan state (SKILLPLAN_STATE_PATH overrides)."""
    return Path(os.getenv("SKILLPLAN_STATE_PATH", str(STATE_DIR / "plan_state.json")))


def export_dir() -> Path:
    """Directory exports are written to (SKILLPLAN_EXPORT_DIR overrides)."""
    return Path(os.getenv("SKILLPLAN_EXPORT_DIR", str(STATE_DIR / "exports")))
