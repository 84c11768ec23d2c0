"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.color import ColorSystem

from trello_github_migrator.config import MigratorSettings


def test_settings_defaults() -> None:
    settings = MigratorSettings()

    assert settings.log_level == "WARNING"
    assert settings.color_system == "truecolor"
    assert settings.rich_color_system == ColorSystem.TRUECOLOR


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "LOG_LEVEL=DEBUG",
                "TRELLO_GITHUB_COLOR_SYSTEM=256",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = MigratorSettings()

    assert settings.log_level == "DEBUG"
    assert settings.rich_color_system == ColorSystem.EIGHT_BIT


def test_settings_env_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("TRELLO_GITHUB_COLOR_SYSTEM=256\n", encoding="utf-8")
    monkeypatch.setenv("TRELLO_GITHUB_COLOR_SYSTEM", "none")

    settings = MigratorSettings()

    assert settings.color_system == "none"
    assert settings.rich_color_system is None


def test_settings_rejects_unknown_color_system(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRELLO_GITHUB_COLOR_SYSTEM", "sixteen-million")

    with pytest.raises(ValidationError):
        MigratorSettings()
