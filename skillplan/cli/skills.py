"""CLI to list, add and remove skills in the saved plan."""
import argparse

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.table import Table

from skillplan.cli.common import add_common_args, configure_logging, console, fail
from skillplan.tools.errors import DuplicateSkillError
from skillplan.tools.plan_actions import add_popular_skills, add_skill, remove_skill
from skillplan.tools.plan_io import load_or_default, save_state


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Manage the skills in your learning plan")
    add_common_args(parser)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show all skills")

    add_p = sub.add_parser("add", help="Add a skill")
    add_p.add_argument("name", help="Skill name")
    add_p.add_argument("--priority", choices=["High", "Medium", "Low"], default="Medium")
    add_p.add_argument("--hours", type=float, required=True, help="Estimated hours")

    rm_p = sub.add_parser("remove", help="Remove a skill by id")
    rm_p.add_argument("skill_id")

    pop_p = sub.add_parser("popular", help="Add skills from the popular catalogue")
    pop_p.add_argument("names", nargs="*", help="Only these catalogue skills (default: all)")

    args = parser.parse_args()
    configure_logging(args)

    state = load_or_default(args.state)

    if args.command == "add":
        try:
            skill = add_skill(state, args.name, args.priority, args.hours)
        except (DuplicateSkillError, ValidationError) as e:
            fail(str(e))
        save_state(state, args.state)
        console.print(f"✓ [green]Added[/green] {skill.name} ({skill.priority}, {skill.est_hours:g}h)")
    elif args.command == "remove":
        if not remove_skill(state, args.skill_id):
            fail(f"No skill with id {args.skill_id}")
        save_state(state, args.state)
        console.print(f"✓ [green]Removed[/green] {args.skill_id}")
    elif args.command == "popular":
        added = add_popular_skills(state, args.names or None)
        save_state(state, args.state)
        console.print(f"✓ [green]Added {len(added)} skill(s)[/green]")

    _print_skills(state.skills)


def _print_skills(skills):
    if not skills:
        console.print("[yellow]No skills yet. Add one with 'skills add NAME --hours H'.[/yellow]")
        return

    table = Table(title="Skills")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Priority")
    table.add_column("Est. hours", justify="right", style="magenta")
    for skill in skills:
        table.add_row(skill.id, skill.name, skill.priority, f"{skill.est_hours:g}")
    console.print(table)


if __name__ == "__main__":
    main()
