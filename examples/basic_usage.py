#!/usr/bin/env python3
"""Programmatic label sync example.

This demonstrates using the sync components directly:

* load settings from `.env`
* build the desired labels in code instead of a YAML template
* preview the plan, then apply it unless `--dry-run` is passed

Repository selection is passed as arguments (not read from `.env`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from github_label_sync.labels import Label
from github_label_sync.sync.config import LabelSyncSettings
from github_label_sync.sync.executor import LabelSyncExecutor, SyncOptions
from github_label_sync.sync.github.client import LabelClient
from github_label_sync.sync.logging import configure_logging

DESIRED = [
    Label(name="bug", color="fc2929"),
    Label(name="duplicate", color="cccccc"),
    Label(name="enhancement", color="84b6eb"),
]


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync a fixed label set (programmatic example).")
    parser.add_argument("--user", required=True, help="Owner of the repository")
    parser.add_argument("--repo", required=True, help="Repository name")
    parser.add_argument("--dry-run", action="store_true", help="Only print the plan")
    parser.add_argument(
        "--keep-unknown",
        action="store_true",
        help="Do not delete labels that are not part of the fixed set",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = LabelSyncSettings()
    configure_logging(settings.log_level)

    options = SyncOptions(dry_run=args.dry_run, delete=not args.keep_unknown)

    with LabelClient(
        token=settings.require_token(),
        user=args.user,
        repo=args.repo,
        base_url=settings.github_base_url,
    ) as client:
        report = LabelSyncExecutor(client=client, options=options).sync(DESIRED)

    if not report.actions:
        print(f"{args.user}/{args.repo} already matches the label set")
        return 0

    for outcome in report.outcomes:
        print(outcome.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
