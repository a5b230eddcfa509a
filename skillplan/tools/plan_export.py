"""Export a generated plan to Markdown, CSV or JSON."""
import csv
from pathlib import Path

from skillplan.models.plan_state import PlanState
from skillplan.models.schedule import ScheduleBlock


CSV_COLUMNS = ["date", "start", "end", "type", "minutes", "skill", "completed"]


def _block_label(block: ScheduleBlock) -> str:
    return block.skill_name or block.type.capitalize()


def _hours(minutes: int) -> str:
    h, m = divmod(minutes, 60)
    return f"{h}h {m}m" if h else f"{m}m"


def export_to_markdown(state: PlanState, output_path: Path) -> None:
    """Printable plan: a block table per day, then the summary."""
    settings = state.settings
    lines = ["# Learning Plan", ""]
    lines.append(f"- Mode: {settings.mode}")
    lines.append(f"- Window: {settings.start_time} - {settings.end_time}")
    lines.append(f"- Work blocks: {settings.work_block_mins} min, breaks: {settings.break_mins} min")
    if settings.lunch:
        lines.append(f"- Lunch: {settings.lunch.start} ({settings.lunch.duration} min)")
    lines.append("")

    for day in state.schedule or []:
        lines.append(f"## {day.date}")
        lines.append("")
        lines.append("| Time | Activity | Type | Minutes | Done |")
        lines.append("|------|----------|------|---------|------|")
        for block in day.blocks:
            done = "x" if block.completed else ""
            lines.append(
                f"| {block.start} - {block.end} | {_block_label(block)} | {block.type} "
                f"| {block.minutes} | {done} |"
            )
        lines.append("")

    if state.summary:
        lines.append("## Summary")
        lines.append("")
        lines.append("| Skill | Time | Share |")
        lines.append("|-------|------|-------|")
        for entry in state.summary:
            lines.append(f"| {entry.skill_name} | {_hours(entry.minutes)} | {entry.percent:.1f}% |")
        lines.append("")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(lines), encoding="utf-8")


def export_to_csv(state: PlanState, output_path: Path) -> None:
    """One row per block across all days."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for day in state.schedule or []:
            for block in day.blocks:
                writer.writerow([
                    day.date,
                    block.start,
                    block.end,
                    block.type,
                    block.minutes,
                    block.skill_name or "",
                    "" if block.completed is None else str(block.completed).lower(),
                ])


def export_to_json(state: PlanState, output_path: Path) -> None:
    """Full plan state, same shape as the saved state file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
