"""CLI to generate the learning schedule for the saved skills."""
import argparse
from datetime import date

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.table import Table
from tqdm import tqdm

from skillplan.cli.common import add_common_args, configure_logging, console, fail
from skillplan.models.settings import PlanSettings
from skillplan.tools.errors import ScheduleError
from skillplan.tools.plan_actions import generate_for_state
from skillplan.tools.plan_io import load_or_default, save_state


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Generate a day-by-day learning schedule")
    add_common_args(parser)
    parser.add_argument("--mode", choices=["Daily", "Monthly"])
    parser.add_argument("--daily-hours", type=float, help="Hours to allocate (Daily mode)")
    parser.add_argument("--start-date", type=date.fromisoformat, help="First date (Monthly mode)")
    parser.add_argument("--end-date", type=date.fromisoformat, help="Last date (Monthly mode)")
    parser.add_argument("--start-time", help="Window start, HH:MM")
    parser.add_argument("--end-time", help="Window end, HH:MM")
    parser.add_argument("--work-block", type=int, help="Work block length in minutes (>= 25)")
    parser.add_argument("--break", dest="break_mins", type=int, help="Break length in minutes")
    parser.add_argument("--lunch-start", help="Lunch start, HH:MM")
    parser.add_argument("--lunch-duration", type=int, help="Lunch length in minutes")
    parser.add_argument("--no-lunch", action="store_true", help="Schedule without a lunch break")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="Date to use as 'today' in Daily mode (default: system date)"
    )

    args = parser.parse_args()
    configure_logging(args)

    state = load_or_default(args.state)

    try:
        settings = _apply_overrides(state.settings, args)
    except ValidationError as e:
        fail(f"Invalid settings:\n{e}")

    pbar = tqdm(desc="Scheduling", unit="day")

    def progress_callback(day):
        pbar.set_postfix_str(day.date)
        pbar.update(1)

    try:
        result = generate_for_state(state, settings=settings, today=args.today, progress_callback=progress_callback)
    except ScheduleError as e:
        pbar.close()
        fail(f"Generation failed: {e}")
    pbar.close()

    save_state(state, args.state)

    console.print(f"\n[bold green]Schedule Generated![/bold green] {len(result.schedule)} day(s)\n")

    table = Table(title="Time Allocation")
    table.add_column("Skill", style="cyan")
    table.add_column("Minutes", style="magenta", justify="right")
    table.add_column("Share", justify="right")
    for entry in result.summary:
        table.add_row(entry.skill_name, str(entry.minutes), f"{entry.percent:.1f}%")
    console.print(table)
    console.print(f"\nSaved: {args.state}")


def _apply_overrides(settings: PlanSettings, args: argparse.Namespace) -> PlanSettings:
    """Merge command-line overrides into the saved settings and re-validate."""
    data = settings.model_dump()
    overrides = {
        "mode": args.mode,
        "daily_hours": args.daily_hours,
        "start_date": args.start_date,
        "end_date": args.end_date,
        "start_time": args.start_time,
        "end_time": args.end_time,
        "work_block_mins": args.work_block,
        "break_mins": args.break_mins,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})

    if args.no_lunch:
        data["lunch"] = None
    elif args.lunch_start or args.lunch_duration:
        lunch = data.get("lunch") or {"start": "13:00", "duration": 60}
        if args.lunch_start:
            lunch["start"] = args.lunch_start
        if args.lunch_duration:
            lunch["duration"] = args.lunch_duration
        data["lunch"] = lunch

    return PlanSettings(**data)


if __name__ == "__main__":
    main()
