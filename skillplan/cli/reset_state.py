"""CLI to reset the saved plan to its default settings."""
import argparse

from dotenv import load_dotenv

from skillplan.cli.common import add_common_args, configure_logging, console
from skillplan.tools.plan_io import reset_state


def main():
    """Drop all skills and the schedule, restore default settings."""
    load_dotenv()
    parser = argparse.ArgumentParser(description="Reset the learning plan to defaults")
    add_common_args(parser)
    args = parser.parse_args()
    configure_logging(args)

    state = reset_state(args.state)
    console.print("✓ [green]Reset Successful[/green]: all settings and skills have been reset to default.")
    console.print(f"  Mode: {state.settings.mode}, {state.settings.daily_hours:g}h/day, "
                  f"{state.settings.start_time}-{state.settings.end_time}")


if __name__ == "__main__":
    main()
