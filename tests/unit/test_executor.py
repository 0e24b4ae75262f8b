"""Unit tests for applying label actions (mocked client)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from github_label_sync.labels import Label, LabelAction
from github_label_sync.sync.errors import TransportError, UnexpectedStatusError
from github_label_sync.sync.executor import (
    ActionOutcome,
    LabelSyncExecutor,
    SyncOptions,
)
from github_label_sync.sync.github.client import LabelClient

DESIRED = [Label("bug", "fc2929"), Label("docs", "0075ca")]
EXISTING = [
    Label("bug", "000000", url="url-bug"),
    Label("stale", "eeeeee", url="url-stale"),
]


def _client(existing: list[Label] | None = None) -> Mock:
    mock_client = Mock(spec=LabelClient)
    mock_client.repository = "octo-org/octo-repo"
    mock_client.list_labels.return_value = list(EXISTING if existing is None else existing)
    return mock_client


def test_sync_applies_actions_in_plan_order() -> None:
    mock_client = _client()
    manager = Mock()
    manager.attach_mock(mock_client.create_label, "create_label")
    manager.attach_mock(mock_client.update_label, "update_label")
    manager.attach_mock(mock_client.delete_label, "delete_label")

    report = LabelSyncExecutor(client=mock_client).sync(DESIRED)

    mock_client.list_labels.assert_called_once_with()
    # Label equality is by name only.
    assert [
        (name, label.name, label.color, label.url)
        for name, (label,), _ in manager.mock_calls
    ] == [
        ("update_label", "bug", "fc2929", "url-bug"),
        ("create_label", "docs", "0075ca", None),
        ("delete_label", "stale", "eeeeee", "url-stale"),
    ]
    assert [o.describe() for o in report.outcomes] == [
        "UPDATE bug: fc2929",
        "CREATE docs: 0075ca",
        "DELETE stale",
    ]
    assert report.changed
    assert report.failed == []


def test_update_is_addressed_at_existing_locator() -> None:
    mock_client = _client()

    LabelSyncExecutor(client=mock_client).sync(DESIRED)

    updated = mock_client.update_label.call_args.args[0]
    assert updated.url == "url-bug"
    assert updated.color == "fc2929"


def test_dry_run_plans_the_same_actions_without_remote_writes() -> None:
    live_client = _client()
    dry_client = _client()

    live = LabelSyncExecutor(client=live_client).sync(DESIRED)
    dry = LabelSyncExecutor(client=dry_client, options=SyncOptions(dry_run=True)).sync(DESIRED)

    assert [(a.kind, a.label.name, a.label.color, a.label.url) for a in dry.actions] == [
        (a.kind, a.label.name, a.label.color, a.label.url) for a in live.actions
    ]
    assert dry_client.create_label.call_count == 0
    assert dry_client.update_label.call_count == 0
    assert dry_client.delete_label.call_count == 0
    assert [o.describe() for o in dry.outcomes] == [
        "[DRY RUN] UPDATE bug: fc2929",
        "[DRY RUN] CREATE docs: 0075ca",
        "[DRY RUN] DELETE stale",
    ]


def test_dry_run_apply_makes_no_client_calls() -> None:
    mock_client = _client()
    executor = LabelSyncExecutor(client=mock_client, options=SyncOptions(dry_run=True))

    outcomes = executor.apply([LabelAction.create(Label("bug", "fc2929"))])

    assert outcomes == [ActionOutcome(verb="CREATE", name="bug", color="fc2929", dry_run=True)]
    assert mock_client.mock_calls == []


def test_failed_action_does_not_abort_the_run() -> None:
    mock_client = _client()
    mock_client.update_label.side_effect = UnexpectedStatusError(
        method="PATCH", url="url-bug", status_code=422, body='{"message": "Validation Failed"}'
    )
    mock_client.create_label.side_effect = TransportError("connection reset")

    report = LabelSyncExecutor(client=mock_client).sync(DESIRED)

    mock_client.delete_label.assert_called_once()
    assert mock_client.delete_label.call_args.args[0] is EXISTING[1]
    assert [o.ok for o in report.outcomes] == [False, False, True]
    assert len(report.failed) == 2
    assert report.outcomes[0].describe().startswith("FAILURE UPDATE bug: PATCH url-bug returned HTTP 422")
    assert report.outcomes[1].describe() == "FAILURE CREATE docs: connection reset"


@pytest.mark.parametrize(
    ("options", "expected"),
    [
        (SyncOptions(delete=False), ["UPDATE bug: fc2929", "CREATE docs: 0075ca"]),
        (SyncOptions(create=False), ["DELETE stale"]),
        (SyncOptions(create=False, delete=False), []),
    ],
)
def test_toggles_suppress_action_categories(options: SyncOptions, expected: list[str]) -> None:
    mock_client = _client()

    report = LabelSyncExecutor(client=mock_client, options=options).sync(DESIRED)

    assert [o.describe() for o in report.outcomes] == expected


def test_no_changes_produce_no_outcomes() -> None:
    mock_client = _client(existing=[Label("bug", "fc2929", url="url-bug")])

    report = LabelSyncExecutor(client=mock_client).sync([Label("bug", "fc2929")])

    assert report.actions == []
    assert report.outcomes == []
    assert not report.changed


def test_listing_failure_propagates_before_any_action() -> None:
    mock_client = _client()
    mock_client.list_labels.side_effect = UnexpectedStatusError(
        method="GET", url="labels", status_code=500, body="boom"
    )

    with pytest.raises(UnexpectedStatusError):
        LabelSyncExecutor(client=mock_client).sync(DESIRED)

    assert mock_client.create_label.call_count == 0
    assert mock_client.update_label.call_count == 0
    assert mock_client.delete_label.call_count == 0
