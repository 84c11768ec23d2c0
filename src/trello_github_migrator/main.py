"""CLI entrypoint for reviewing label reconciliation before a migration.

Reads a dry-run label report (a JSON array of label outcomes) and prints one
color-coded line per label.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from trello_github_migrator import __version__
from trello_github_migrator.config import MigratorSettings
from trello_github_migrator.labels import parse_labels
from trello_github_migrator.logging import configure_logging
from trello_github_migrator.rendering import (
    InvalidTrelloColorError,
    render_github_field_palette,
    render_label_outcome,
    render_trello_palette,
)

logger = logging.getLogger(__name__)


def _read_report(source: str) -> object:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-github-labels",
        description="Review how Trello labels will be reconciled with GitHub labels",
    )
    parser.add_argument(
        "--version", action="version", version=f"trello-github-migrator {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a dry-run label report")
    render.add_argument(
        "--input",
        "-i",
        dest="input",
        default="-",
        help="Path to a JSON array of label outcomes, or '-' for stdin (default)",
    )

    subparsers.add_parser("palette", help="Show every Trello color and GitHub field option color")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = MigratorSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    color_system = settings.rich_color_system

    try:
        if args.command == "render":
            labels = parse_labels(_read_report(args.input))
            logger.info("Rendering label report", extra={"count": len(labels)})
            for label in labels:
                print(render_label_outcome(label, color_system=color_system))
            return 0

        if args.command == "palette":
            print("Trello label colors:")
            for line in render_trello_palette(color_system=color_system):
                print(f"  {line}")
            print("GitHub field option colors:")
            for line in render_github_field_palette(color_system=color_system):
                print(line)
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except (ValidationError, json.JSONDecodeError) as e:
        logger.warning("Invalid label report", extra={"input": args.input})
        print(f"Invalid label report: {e}", file=sys.stderr)
        return 2

    except InvalidTrelloColorError as e:
        logger.error(str(e), extra={"label": e.label_name, "color": e.color})
        print(str(e), file=sys.stderr)
        return 3

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
