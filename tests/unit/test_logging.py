"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging

from trello_github_migrator.logging import configure_logging


def test_configure_logging_emits_json_with_extra() -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream)

    logging.getLogger("trello_github_migrator.test").info(
        "Rendering label report", extra={"count": 3}
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "trello_github_migrator.test"
    assert payload["message"] == "Rendering label report"
    assert payload["extra"] == {"count": 3}


def test_configure_logging_replaces_existing_handlers() -> None:
    first = io.StringIO()
    second = io.StringIO()
    configure_logging("WARNING", stream=first)
    configure_logging("WARNING", stream=second)

    logging.getLogger("trello_github_migrator.test").warning("once")

    assert first.getvalue() == ""
    assert json.loads(second.getvalue())["message"] == "once"


def test_configure_logging_includes_exception() -> None:
    stream = io.StringIO()
    configure_logging("ERROR", stream=stream)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("trello_github_migrator.test").exception("Command failed")

    payload = json.loads(stream.getvalue())
    assert "RuntimeError: boom" in payload["exception"]
