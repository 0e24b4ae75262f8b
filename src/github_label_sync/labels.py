"""Label value objects and the actions computed from them.

Labels are identified by name only. Two labels with the same name but a
different color are the *same* label that needs an update, which is what lets
the reconciler tell "update" apart from "create".
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from github_label_sync.sync.errors import ConfigError, DuplicateLabelError

_COLOR_RE = re.compile(r"^[0-9a-f]{6}$")


@dataclass(frozen=True, slots=True)
class Label:
    """A named, colored label.

    `url` is the GitHub API locator of the label. It is set for labels fetched
    from GitHub and is `None` for template labels that have not been created yet.
    """

    name: str
    color: str = field(compare=False)
    url: str | None = field(default=None, compare=False)

    def with_url(self, url: str | None) -> Label:
        return replace(self, url=url)


class ActionKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def verb(self) -> str:
        return self.value.upper()


@dataclass(frozen=True, slots=True)
class LabelAction:
    """A single create/update/delete operation that has not been executed yet."""

    kind: ActionKind
    label: Label

    @classmethod
    def create(cls, label: Label) -> LabelAction:
        return cls(kind=ActionKind.CREATE, label=label)

    @classmethod
    def update(cls, desired: Label, existing: Label) -> LabelAction:
        # Desired name and color, addressed at the existing remote resource.
        return cls(kind=ActionKind.UPDATE, label=desired.with_url(existing.url))

    @classmethod
    def delete(cls, label: Label) -> LabelAction:
        return cls(kind=ActionKind.DELETE, label=label)


def normalize_color(value: str) -> str:
    """Return `value` as six lowercase hex digits without a leading '#'.

    Raises:
        ConfigError: if the value is not a 6-digit hex color.
    """

    normalized = value.strip().lstrip("#").lower()
    if not _COLOR_RE.match(normalized):
        raise ConfigError(f"Invalid label color {value!r}: expected 6 hex digits, e.g. 'fc2929'")
    return normalized


def ensure_unique_names(labels: Iterable[Label]) -> None:
    counts = Counter(label.name for label in labels)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateLabelError(duplicates)
