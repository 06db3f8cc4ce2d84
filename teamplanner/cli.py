"""Command line entry point."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from .analysis import SelectionSummary, summarize_selection
from .config import BACKENDS, Settings, create_store
from .planner import auto_select_event, selection_report
from .storage import StoreError


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="teamplanner",
        description="Plan event teams from accepted invitations.",
    )
    parser.add_argument("--backend", choices=BACKENDS, help="roster store to use")
    parser.add_argument("--data-file", type=Path, help="JSON roster for the local backend")
    parser.add_argument("--api-url", help="root URL of the teams API")
    parser.add_argument("--group-id", help="group managed through the API")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    select = commands.add_parser("auto-select", help="auto-select the teams of an event")
    select.add_argument("event_id")
    select.add_argument(
        "--dry-run", action="store_true", help="show the selection without saving it"
    )

    summary = commands.add_parser("summary", help="show the current selection of an event")
    summary.add_argument("event_id")

    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "backend": args.backend,
        "data_file": args.data_file,
        "api_url": args.api_url,
        "group_id": args.group_id,
    }
    return dataclasses.replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )


def format_summary(summary: SelectionSummary) -> str:
    """Render a selection summary as plain text."""
    lines = [
        f"Selected {summary.total_selected_count}/{summary.total_capacity} "
        f"({summary.accepted_count} accepted, {summary.unassigned_count} unassigned)"
    ]
    for team in summary.team_stats:
        lines.append(
            f"  {team.team_name}: {team.player_count} players, "
            f"avg level {team.average_level:.1f}"
        )
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(Settings.from_env(), args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format=LOG_FORMAT,
    )

    store = create_store(settings)
    try:
        if args.command == "auto-select":
            event = auto_select_event(store, args.event_id, dry_run=args.dry_run)
            summary = summarize_selection(event, store.get_players())
        else:
            summary = selection_report(store, args.event_id)
    except StoreError as e:
        logger.error("%s", e)
        return 1

    print(format_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
