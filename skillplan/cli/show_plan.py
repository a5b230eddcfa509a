"""CLI to show a day of the schedule with live status."""
import argparse
from datetime import datetime

from dotenv import load_dotenv
from rich.table import Table

from skillplan.cli.common import add_common_args, configure_logging, console, fail
from skillplan.tools.live_tracker import day_progress, refresh_live, task_status
from skillplan.tools.plan_actions import toggle_completion
from skillplan.tools.plan_io import load_state, save_state


TYPE_STYLES = {
    "work": "bold",
    "break": "green",
    "lunch": "yellow",
    "buffer": "dim",
}


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Show the schedule and what is happening now")
    add_common_args(parser)
    parser.add_argument("--date", help="Day to show, YYYY-MM-DD (default: today, else first day)")
    parser.add_argument("--toggle", metavar="BLOCK_ID", help="Flip completion of a work block on the shown day")

    args = parser.parse_args()
    configure_logging(args)

    state = load_state(args.state)
    if state is None or not state.schedule:
        fail("No schedule found. Run generate_plan first.")

    now = datetime.now()
    live = refresh_live(state, now)

    day_date = args.date or (live.date if state.find_day(live.date) else state.schedule[0].date)
    day = state.find_day(day_date)
    if day is None:
        fail(f"No schedule for {day_date}")

    if args.toggle:
        new_value = toggle_completion(state, day_date, args.toggle)
        if new_value is None:
            fail(f"No work block {args.toggle} on {day_date}")
        console.print(f"✓ Block {args.toggle} marked {'completed' if new_value else 'not completed'}")

    save_state(state, args.state)

    console.print(f"\n[bold cyan]{live.date} {live.time}[/bold cyan]  Now: [yellow]{live.current_station}[/yellow]")
    console.print(f"Day progress: {day_progress(state.settings, now):.0f}%\n")

    table = Table(title=f"Schedule for {day.date}")
    table.add_column("Time")
    table.add_column("Activity")
    table.add_column("Minutes", justify="right")
    table.add_column("Status")
    table.add_column("ID", style="dim")
    for block in day.blocks:
        style = TYPE_STYLES.get(block.type, "")
        label = block.skill_name or block.type.capitalize()
        table.add_row(
            f"{block.start} - {block.end}",
            f"[{style}]{label}[/{style}]" if style else label,
            str(block.minutes),
            task_status(block, day, now),
            block.id if block.type == "work" else "",
        )
    console.print(table)

    other_days = [d.date for d in state.schedule if d.date != day.date]
    if other_days:
        console.print(f"\nOther days: {len(other_days)} ({other_days[0]} ... {other_days[-1]})")


if __name__ == "__main__":
    main()
