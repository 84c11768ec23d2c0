"""Trello to GitHub migrator: label reconciliation and review rendering.

Provides:
- the closed set of label reconciliation outcomes
- color-coded terminal rendering of those outcomes for dry-run review
- a small CLI to render a dry-run label report
"""

__version__ = "0.1.0"

from trello_github_migrator.labels import FieldOption, Label, parse_label, parse_labels
from trello_github_migrator.rendering import (
    InvalidTrelloColorError,
    render_github_field_option,
    render_github_label,
    render_label_outcome,
    render_trello_label,
)

__all__ = [
    "__version__",
    "FieldOption",
    "InvalidTrelloColorError",
    "Label",
    "parse_label",
    "parse_labels",
    "render_github_field_option",
    "render_github_label",
    "render_label_outcome",
    "render_trello_label",
]
