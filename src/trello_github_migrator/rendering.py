"""Terminal rendering for label reconciliation outcomes.

All functions here are pure: they return strings with embedded ANSI styling and
never print. Styling goes through ``rich.style.Style.render`` so output is
deterministic for a given ``color_system`` (truecolor by default; ``None``
produces plain text).

Trust levels differ by origin:
- Trello colors must be one of the 30 named Trello colors, otherwise
  ``InvalidTrelloColorError`` is raised.
- GitHub label colors come from GitHub itself and are used as-is.
- GitHub field-option colors fall back to an unstyled bullet when unknown.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import assert_never

from rich.color import Color, ColorParseError, ColorSystem
from rich.style import Style

from trello_github_migrator.labels import (
    FieldOption,
    GithubLabel,
    Label,
    ListMappedLabel,
    MappedLabel,
    MissingLabel,
    MissingListLabel,
    SkippedLabel,
    ToCreateLabel,
    TrelloLabel,
)

logger = logging.getLogger(__name__)

DEFAULT_COLOR_SYSTEM: ColorSystem | None = ColorSystem.TRUECOLOR

# Trello color names to their hex values.
TRELLO_LABEL_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "lime_light": "#D3F1A7",
        "lime": "#94C748",
        "lime_dark": "#5B7F24",
        "red_light": "#FFD5D2",
        "red": "#F87168",
        "red_dark": "#C9372C",
        "orange_light": "#FEDEC8",
        "orange": "#FEA362",
        "orange_dark": "#C25100",
        "yellow_light": "#F8E6A0",
        "yellow": "#F5CD47",
        "yellow_dark": "#946F00",
        "green_light": "#BAF3DB",
        "green": "#4BCE97",
        "green_dark": "#1F845A",
        "sky_light": "#C6EDFB",
        "sky": "#6CC3E0",
        "sky_dark": "#227D9B",
        "blue_light": "#CCE0FF",
        "blue": "#579DFF",
        "blue_dark": "#0C66E4",
        "purple_light": "#DFD8FD",
        "purple": "#9F8FEF",
        "purple_dark": "#6E5DC6",
        "pink_light": "#FDD0EC",
        "pink": "#E774BB",
        "pink_dark": "#AE4787",
        "black_light": "#DCDFE4",
        "black": "#8590A2",
        "black_dark": "#626F86",
    }
)

# GitHub project field option colors (foreground shades).
GITHUB_FIELD_OPTION_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "BLUE": "#0969da",
        "GRAY": "#59636e",
        "GREEN": "#1a7f37",
        "ORANGE": "#bc4c00",
        "PINK": "#bf3989",
        "PURPLE": "#8250df",
        "RED": "#d1242f",
        "YELLOW": "#9a6700",
    }
)

# Background shades of the same field option colors. Reference only; not used for rendering.
GITHUB_FIELD_OPTION_LIGHT_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "BLUE": "#ddf4ff",
        "GRAY": "#f6f8fa",
        "GREEN": "#dafbe1",
        "ORANGE": "#fff1e5",
        "PINK": "#ffeff7",
        "PURPLE": "#fbefff",
        "RED": "#ffebe9",
        "YELLOW": "#fff8c5",
    }
)

_BOLD = Style(bold=True)
_DEFAULT = Style(color="default", bgcolor="default")

FIELD_OPTION_BULLET = "●"
OUTCOME_ARROW = "→"


class InvalidTrelloColorError(ValueError):
    """Raised when a Trello label carries a color name Trello does not define."""

    def __init__(self, *, label_name: str, color: str, valid_colors: tuple[str, ...]) -> None:
        self.label_name = label_name
        self.color = color
        self.valid_colors = valid_colors
        super().__init__(
            f'label "{label_name}"\'s color ("{color}") should be a valid Trello color '
            f"({format_disjunction(valid_colors)})."
        )


def format_disjunction(items: Iterable[str]) -> str:
    """Join items as an English "or" list: ``A``, ``A or B``, ``A, B, or C``."""

    values = list(items)
    if len(values) <= 1:
        return "".join(values)
    if len(values) == 2:
        return f"{values[0]} or {values[1]}"
    return f"{', '.join(values[:-1])}, or {values[-1]}"


def _badge(name: str) -> str:
    return f" {name} "


def _github_color(color: str) -> Color | None:
    # GitHub returns bare hex ("ededed"); accept "#ededed" and the short "#eee" too.
    value = color.strip().removeprefix("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    try:
        return Color.parse(f"#{value}")
    except ColorParseError:
        logger.debug("Unparseable GitHub label color", extra={"color": color})
        return None


def _render_github_badge(name: str, color: str, color_system: ColorSystem | None) -> str:
    parsed = _github_color(color)
    if parsed is None:
        return _badge(name)
    return Style(bgcolor=parsed).render(_badge(name), color_system=color_system)


def render_trello_label(
    label: TrelloLabel, *, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> str:
    """Render a Trello label's name on its Trello color.

    Raises:
        InvalidTrelloColorError: if the label's color is not a known Trello color.
    """

    hex_value = TRELLO_LABEL_COLORS.get(label.trello.color)
    if hex_value is None:
        raise InvalidTrelloColorError(
            label_name=label.trello.name,
            color=label.trello.color,
            valid_colors=tuple(TRELLO_LABEL_COLORS),
        )
    # rich caches a Style's codes on first render, so colored styles are built per call.
    style = Style(bgcolor=hex_value)
    return style.render(_badge(label.trello.name), color_system=color_system)


def render_github_label(
    label: GithubLabel, *, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> str:
    """Render the GitHub side of a label.

    Labels still to be created are prefixed with ``Will create:``; a label
    without a decided color is shown in bold instead of on a background.
    """

    match label:
        case ToCreateLabel():
            if label.github.color:
                prefix = _BOLD.render("Will create:", color_system=color_system)
                badge = _render_github_badge(label.github.name, label.github.color, color_system)
                return f"{prefix} {badge}"
            return f"Will create: {_BOLD.render(label.github.name, color_system=color_system)}"
        case MappedLabel() | ListMappedLabel():
            return _render_github_badge(label.github.name, label.github.color, color_system)
        case _:
            assert_never(label)


def render_github_field_option(
    option: FieldOption, *, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> str:
    """Render a project field option as `` ● <name>`` with a colored bullet.

    ``option.color`` is one of the GitHub field option color names, e.g.
    ``RED``. An unknown color leaves the bullet unstyled.
    """

    hex_value = GITHUB_FIELD_OPTION_COLORS.get(option.color)
    if hex_value is None:
        logger.debug(
            "Unknown field option color",
            extra={"option_id": option.id, "color": option.color},
        )
        bullet = FIELD_OPTION_BULLET
    else:
        bullet = Style(bold=True, color=hex_value).render(
            FIELD_OPTION_BULLET, color_system=color_system
        )
    return f" {bullet} {_DEFAULT.render(option.name, color_system=color_system)}"


def _format_lookup(lookup: int | str) -> str:
    if isinstance(lookup, int):
        return f"#{lookup}"
    return f'"{lookup}"'


def render_label_outcome(
    label: Label, *, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> str:
    """Render one dry-run report line for any reconciliation outcome."""

    match label:
        case SkippedLabel():
            source = render_trello_label(label, color_system=color_system)
            return f"{source} {OUTCOME_ARROW} skipped"
        case MissingLabel():
            source = render_trello_label(label, color_system=color_system)
            return (
                f"{source} {OUTCOME_ARROW} missing GitHub label "
                f"{_format_lookup(label.github_lookup)}"
            )
        case ToCreateLabel() | MappedLabel():
            source = render_trello_label(label, color_system=color_system)
            target = render_github_label(label, color_system=color_system)
            return f"{source} {OUTCOME_ARROW} {target}"
        case MissingListLabel():
            return (
                f'List "{label.trello_list.name}" {OUTCOME_ARROW} missing GitHub label '
                f"{_format_lookup(label.github_lookup)}"
            )
        case ListMappedLabel():
            target = render_github_label(label, color_system=color_system)
            return f'List "{label.trello_list.name}" {OUTCOME_ARROW} {target}'
        case _:
            assert_never(label)


def render_trello_palette(*, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM) -> list[str]:
    """One swatch per Trello color, each showing the color's own name."""

    return [
        Style(bgcolor=hex_value).render(_badge(name), color_system=color_system)
        for name, hex_value in TRELLO_LABEL_COLORS.items()
    ]


def render_github_field_palette(
    *, color_system: ColorSystem | None = DEFAULT_COLOR_SYSTEM
) -> list[str]:
    return [
        render_github_field_option(
            FieldOption(id=name, name=name, color=name), color_system=color_system
        )
        for name in GITHUB_FIELD_OPTION_COLORS
    ]
