"""Compute the label operations needed to converge GitHub to a template."""

from __future__ import annotations

from collections.abc import Sequence

from github_label_sync.labels import Label, LabelAction, ensure_unique_names


def reconcile(
    desired: Sequence[Label],
    existing: Sequence[Label],
    *,
    create: bool = True,
    delete: bool = True,
) -> list[LabelAction]:
    """Return the ordered actions that turn `existing` into `desired`.

    Labels are matched by name. A match with a different color yields an update
    addressed at the existing label's url, a desired label without a match
    yields a create, and an existing label without a match yields a delete.

    All creates and updates (in template order) come before any delete (in
    `existing` order).

    Args:
        desired: Labels declared in the template.
        existing: Labels currently on GitHub.
        create: When False, neither creates nor updates are emitted.
        delete: When False, no deletes are emitted.

    Raises:
        DuplicateLabelError: If `desired` declares a name more than once.
    """

    ensure_unique_names(desired)

    by_name: dict[str, Label] = {}
    for label in existing:
        by_name.setdefault(label.name, label)

    actions: list[LabelAction] = []

    if create:
        for label in desired:
            current = by_name.get(label.name)
            if current is None:
                actions.append(LabelAction.create(label))
            elif current.color != label.color:
                actions.append(LabelAction.update(label, current))

    if delete:
        wanted = {label.name for label in desired}
        actions.extend(LabelAction.delete(label) for label in existing if label.name not in wanted)

    return actions
