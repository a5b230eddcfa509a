"""CLI to export the saved plan to Markdown, CSV or JSON."""
import argparse
from pathlib import Path

from dotenv import load_dotenv

from skillplan.cli.common import add_common_args, configure_logging, console, fail
from skillplan.config import export_dir
from skillplan.tools.plan_export import export_to_csv, export_to_json, export_to_markdown
from skillplan.tools.plan_io import load_state


EXPORTERS = {
    "md": export_to_markdown,
    "csv": export_to_csv,
    "json": export_to_json,
}


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Export the learning plan")
    add_common_args(parser)
    parser.add_argument("--format", choices=sorted(EXPORTERS), default="md")
    parser.add_argument("--output", type=Path, help="Output file (default: <export dir>/learning_plan.<format>)")

    args = parser.parse_args()
    configure_logging(args)

    state = load_state(args.state)
    if state is None or not state.schedule:
        fail("No schedule found. Run generate_plan first.")

    output_path = args.output or export_dir() / f"learning_plan.{args.format}"
    EXPORTERS[args.format](state, output_path)
    console.print(f"✓ [green]Exported plan to {args.format.upper()}:[/green] {output_path}")


if __name__ == "__main__":
    main()
