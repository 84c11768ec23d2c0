"""Label reconciliation outcomes.

Every Trello label (and every Trello list that maps onto a GitHub label) seen
during a dry run is classified into exactly one of six outcomes. Each outcome is
a frozen model tagged by its ``type`` field, so a payload can only ever carry
the fields its tag allows.

Two narrower unions split the outcomes by origin:
- Trello labels: skipped, toCreate, missing, mapped
- GitHub labels: toCreate, mapped, listMapped
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _LabelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TrelloLabelRef(_LabelModel):
    name: str
    color: str


class TrelloListRef(_LabelModel):
    id: str
    name: str


class GithubLabelDraft(_LabelModel):
    """A GitHub label that does not exist yet; its color may still be undecided."""

    name: str
    color: str | None = None


class GithubLabelRef(_LabelModel):
    id: int
    name: str
    color: str


class FieldOption(_LabelModel):
    """A single-select option of a GitHub project field."""

    id: str
    name: str
    color: str


class SkippedLabel(_LabelModel):
    """A Trello label with no entry in the map file. It won't be transferred."""

    type: Literal["skipped"] = "skipped"
    trello: TrelloLabelRef


class ToCreateLabel(_LabelModel):
    """A Trello label that will be created in GitHub."""

    type: Literal["toCreate"] = "toCreate"
    trello: TrelloLabelRef
    github: GithubLabelDraft


class MissingLabel(_LabelModel):
    """A Trello label whose GitHub counterpart couldn't be found."""

    type: Literal["missing"] = "missing"
    trello: TrelloLabelRef
    github_lookup: int | str


class MappedLabel(_LabelModel):
    type: Literal["mapped"] = "mapped"
    trello: TrelloLabelRef
    github: GithubLabelRef


class MissingListLabel(_LabelModel):
    """A GitHub label granted to cards from a Trello list, but missing in GitHub."""

    type: Literal["missingList"] = "missingList"
    trello_list: TrelloListRef
    github_lookup: int | str


class ListMappedLabel(_LabelModel):
    """A GitHub label granted to cards originating from a Trello list."""

    type: Literal["listMapped"] = "listMapped"
    trello_list: TrelloListRef
    github: GithubLabelRef


Label: TypeAlias = Annotated[
    SkippedLabel | ToCreateLabel | MissingLabel | MappedLabel | MissingListLabel | ListMappedLabel,
    Field(discriminator="type"),
]

# Labels that have come from Trello.
TrelloLabel: TypeAlias = SkippedLabel | ToCreateLabel | MissingLabel | MappedLabel

# Labels that are going to GitHub.
GithubLabel: TypeAlias = ToCreateLabel | MappedLabel | ListMappedLabel

TRELLO_LABEL_TYPES: tuple[type[_LabelModel], ...] = (
    SkippedLabel,
    ToCreateLabel,
    MissingLabel,
    MappedLabel,
)
GITHUB_LABEL_TYPES: tuple[type[_LabelModel], ...] = (
    ToCreateLabel,
    MappedLabel,
    ListMappedLabel,
)

_LABEL_ADAPTER: TypeAdapter[Label] = TypeAdapter(Label)
_LABELS_ADAPTER: TypeAdapter[list[Label]] = TypeAdapter(list[Label])


def parse_label(data: object) -> Label:
    """Validate one label payload (camelCase or snake_case keys)."""

    return _LABEL_ADAPTER.validate_python(data)


def parse_labels(data: object) -> list[Label]:
    """Validate a list of label payloads, e.g. a dry-run report loaded from JSON."""

    return _LABELS_ADAPTER.validate_python(data)


def is_trello_label(label: Label) -> bool:
    return isinstance(label, TRELLO_LABEL_TYPES)


def is_github_label(label: Label) -> bool:
    return isinstance(label, GITHUB_LABEL_TYPES)
