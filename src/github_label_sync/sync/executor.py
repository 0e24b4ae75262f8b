"""Apply reconciled label actions through the GitHub client.

Execution is sequential and best-effort: one failing action is recorded on its
outcome and never stops the remaining actions. Creates and updates are always
attempted before deletes because that is the order `reconcile` emits them in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from github_label_sync.labels import ActionKind, Label, LabelAction
from github_label_sync.sync.errors import ConfigError, GitHubApiError
from github_label_sync.sync.github.client import LabelClient
from github_label_sync.sync.reconcile import reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncOptions:
    """Toggles for one sync run."""

    dry_run: bool = False
    create: bool = True
    delete: bool = True


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """The reported result of one action."""

    verb: str
    name: str
    color: str | None
    dry_run: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.error is not None:
            return f"FAILURE {self.verb} {self.name}: {self.error}"
        text = f"{self.verb} {self.name}"
        if self.color is not None:
            text = f"{text}: {self.color}"
        if self.dry_run:
            text = f"[DRY RUN] {text}"
        return text


@dataclass(frozen=True, slots=True)
class SyncReport:
    actions: list[LabelAction]
    outcomes: list[ActionOutcome] = field(default_factory=list)

    @property
    def failed(self) -> list[ActionOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def changed(self) -> bool:
        return any(o.ok for o in self.outcomes)


class LabelSyncExecutor:
    """Plan and apply label actions for one repository."""

    def __init__(self, *, client: LabelClient, options: SyncOptions | None = None) -> None:
        self._client = client
        self._options = options or SyncOptions()

    @property
    def options(self) -> SyncOptions:
        return self._options

    def plan(self, desired: Sequence[Label], existing: Sequence[Label]) -> list[LabelAction]:
        return reconcile(
            desired,
            existing,
            create=self._options.create,
            delete=self._options.delete,
        )

    def _execute(self, action: LabelAction) -> None:
        if action.kind is ActionKind.CREATE:
            self._client.create_label(action.label)
        elif action.kind is ActionKind.UPDATE:
            self._client.update_label(action.label)
        else:
            self._client.delete_label(action.label)

    def apply(self, actions: Sequence[LabelAction]) -> list[ActionOutcome]:
        """Execute `actions` in order and return one outcome per action.

        In dry-run mode the client is never called.
        """

        outcomes: list[ActionOutcome] = []
        for action in actions:
            label = action.label
            color = None if action.kind is ActionKind.DELETE else label.color
            verb = action.kind.verb

            if self._options.dry_run:
                outcomes.append(ActionOutcome(verb=verb, name=label.name, color=color, dry_run=True))
                continue

            try:
                self._execute(action)
            except (GitHubApiError, ConfigError) as e:
                logger.warning(
                    "Label action failed",
                    extra={"action": action.kind.value, "label": label.name, "error": str(e)},
                )
                outcomes.append(ActionOutcome(verb=verb, name=label.name, color=color, error=str(e)))
                continue

            outcomes.append(ActionOutcome(verb=verb, name=label.name, color=color))
        return outcomes

    def sync(self, desired: Sequence[Label]) -> SyncReport:
        """Fetch the existing labels once, then plan and apply.

        Raises:
            GitHubApiError: If the existing labels cannot be listed.
            DuplicateLabelError: If `desired` repeats a name.
        """

        existing = self._client.list_labels()
        actions = self.plan(desired, existing)
        logger.info(
            "Label sync planned",
            extra={
                "repo": self._client.repository,
                "desired": len(desired),
                "existing": len(existing),
                "actions": len(actions),
                "dry_run": self._options.dry_run,
            },
        )
        outcomes = self.apply(actions)
        return SyncReport(actions=actions, outcomes=outcomes)
