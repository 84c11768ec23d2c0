#!/usr/bin/env python3
"""Programmatic dry-run review example.

This demonstrates using the rendering components directly:

* load settings from `.env`
* build label outcomes the way a reconciliation step would
* print one color-coded line per outcome

A Trello color name can be passed to see how an invalid color is reported.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from trello_github_migrator.config import MigratorSettings
from trello_github_migrator.labels import (
    GithubLabelDraft,
    GithubLabelRef,
    Label,
    ListMappedLabel,
    MappedLabel,
    MissingLabel,
    SkippedLabel,
    ToCreateLabel,
    TrelloLabelRef,
    TrelloListRef,
)
from trello_github_migrator.logging import configure_logging
from trello_github_migrator.rendering import InvalidTrelloColorError, render_label_outcome


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sample label review (example).")
    parser.add_argument(
        "--bug-color", default="red", help='Trello color for the "Bug" label (default: red)'
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = MigratorSettings()
    configure_logging(settings.log_level)

    bug = TrelloLabelRef(name="Bug", color=args.bug_color)
    backlog = TrelloListRef(id="5f1a2b", name="Backlog")
    labels: list[Label] = [
        SkippedLabel(trello=TrelloLabelRef(name="Someday", color="black_light")),
        ToCreateLabel(trello=bug, github=GithubLabelDraft(name="bug", color="d73a4a")),
        ToCreateLabel(
            trello=TrelloLabelRef(name="Docs", color="sky"), github=GithubLabelDraft(name="docs")
        ),
        MissingLabel(trello=TrelloLabelRef(name="Design", color="purple"), github_lookup=404),
        MappedLabel(
            trello=TrelloLabelRef(name="Feature", color="green"),
            github=GithubLabelRef(id=1, name="enhancement", color="a2eeef"),
        ),
        ListMappedLabel(
            trello_list=backlog, github=GithubLabelRef(id=7, name="backlog", color="ededed")
        ),
    ]

    try:
        for label in labels:
            print(render_label_outcome(label, color_system=settings.rich_color_system))
    except InvalidTrelloColorError as e:
        print(str(e), file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
