"""Shared argparse options and logging setup for the CLI tools."""
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from skillplan.config import state_path


console = Console()


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--state",
        type=Path,
        default=state_path(),
        help="Path to plan_state.json"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (per-day allocation details)"
    )


def configure_logging(args: argparse.Namespace) -> None:
    """Set log level and format from --verbose / --debug."""
    if args.debug:
        log_level = logging.DEBUG
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif args.verbose:
        log_level = logging.INFO
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        log_level = logging.WARNING
        log_format = "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]✗ {message}[/red]")
    sys.exit(1)
