"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from trello_github_migrator.labels import (
    GithubLabelDraft,
    GithubLabelRef,
    Label,
    ListMappedLabel,
    MappedLabel,
    MissingLabel,
    MissingListLabel,
    SkippedLabel,
    ToCreateLabel,
    TrelloLabelRef,
    TrelloListRef,
)


@pytest.fixture(autouse=True)
def _isolate_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables and `.env` files out of settings-driven tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("TRELLO_GITHUB_COLOR_SYSTEM", raising=False)


@pytest.fixture
def trello_bug() -> TrelloLabelRef:
    """Provide a Trello label reference with a valid Trello color."""
    return TrelloLabelRef(name="Bug", color="red")


@pytest.fixture
def backlog_list() -> TrelloListRef:
    """Provide a Trello list reference."""
    return TrelloListRef(id="5f1a2b", name="Backlog")


@pytest.fixture
def every_outcome(trello_bug: TrelloLabelRef, backlog_list: TrelloListRef) -> list[Label]:
    """Provide one label for each of the six reconciliation outcomes."""
    return [
        SkippedLabel(trello=TrelloLabelRef(name="Someday", color="black_light")),
        ToCreateLabel(trello=trello_bug, github=GithubLabelDraft(name="bug", color="#123456")),
        MissingLabel(trello=trello_bug, github_lookup=42),
        MappedLabel(trello=trello_bug, github=GithubLabelRef(id=1, name="bug", color="#abcdef")),
        MissingListLabel(trello_list=backlog_list, github_lookup="backlog"),
        ListMappedLabel(
            trello_list=backlog_list, github=GithubLabelRef(id=7, name="backlog", color="ededed")
        ),
    ]


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo `configure_logging` calls made by CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
