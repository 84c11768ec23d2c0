"""Configuration for the label review CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.color import ColorSystem

ColorSystemName = Literal["truecolor", "256", "standard", "none"]

_COLOR_SYSTEMS: dict[str, ColorSystem | None] = {
    "truecolor": ColorSystem.TRUECOLOR,
    "256": ColorSystem.EIGHT_BIT,
    "standard": ColorSystem.STANDARD,
    "none": None,
}


class MigratorSettings(BaseSettings):
    """Settings for rendering label reports.

    Environment variables:
    - LOG_LEVEL                   (optional)
    - TRELLO_GITHUB_COLOR_SYSTEM  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `MigratorSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    color_system: ColorSystemName = Field(
        default="truecolor",
        validation_alias="TRELLO_GITHUB_COLOR_SYSTEM",
        description="Terminal color system used for label badges ('none' for plain text)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @property
    def rich_color_system(self) -> ColorSystem | None:
        """The color system to pass to the renderers."""

        return _COLOR_SYSTEMS[self.color_system]
