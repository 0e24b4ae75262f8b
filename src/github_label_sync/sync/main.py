"""CLI entrypoint for label sync."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from github_label_sync import __version__
from github_label_sync.sync.config import LabelSyncSettings
from github_label_sync.sync.errors import ConfigError, GitHubApiError
from github_label_sync.sync.executor import LabelSyncExecutor, SyncOptions
from github_label_sync.sync.github.client import LabelClient
from github_label_sync.sync.logging import configure_logging
from github_label_sync.sync.template import load_template

logger = logging.getLogger(__name__)

_EPILOG = """\
Example:

    github-label-sync --file labels.yml --token abc123 --user rust-lang --repo rust

The file must contain a list of mappings, each with a name and a color. For
example, here is a template for a subset of the default GitHub Issues labels:

    - name: bug
      color: fc2929
    - name: duplicate
      color: cccccc
    - name: enhancement
      color: 84b6eb

By default, every label in the file will be created (or updated, if the color
changed) on GitHub if it doesn't already exist and every label on GitHub not in
the file will be deleted. Limit this behavior with the --no-create and
--no-delete flags, respectively. No output from the program indicates there
were no changes made.

The token can also be provided via LABEL_SYNC_GITHUB_TOKEN (environment or
.env). It requires the "repo" scope for private repositories and otherwise
only the "public_repo" scope.
"""


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-label-sync",
        description=(
            "Automatically creates, updates and deletes labels on GitHub Issues "
            "to match a template"
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"github-label-sync {__version__}"
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        required=True,
        help="Path to a YAML file containing the label template",
    )
    parser.add_argument(
        "-t",
        "--token",
        type=_non_empty,
        default=None,
        help="OAuth token for authenticating with GitHub (defaults to LABEL_SYNC_GITHUB_TOKEN)",
    )
    parser.add_argument(
        "-u",
        "--user",
        type=_non_empty,
        required=True,
        help="The name of the user or organization that owns the repository",
    )
    parser.add_argument(
        "-r",
        "--repo",
        type=_non_empty,
        required=True,
        help="The name of the repository to apply the label template to",
    )
    parser.add_argument(
        "-e",
        "--endpoint",
        type=_non_empty,
        default=None,
        help="API endpoint to use (defaults to GITHUB_BASE_URL or https://api.github.com)",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Print what the program would do without actually doing it",
    )
    parser.add_argument(
        "--no-create",
        action="store_true",
        help="Do not create or update labels missing from the repo but present in the file",
    )
    parser.add_argument(
        "--no-delete",
        action="store_true",
        help="Do not delete labels in the repo that are not in the file",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> LabelSyncSettings:
    return LabelSyncSettings().with_overrides(
        github_token=args.token,
        github_base_url=args.endpoint,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args)
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your flags and .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    try:
        configure_logging(
            settings.log_level,
            context={"repo": f"{args.user}/{args.repo}", "dry_run": args.dry_run},
        )
    except ValueError:
        print(f"Configuration error: unknown LOG_LEVEL {settings.log_level!r}", file=sys.stderr)
        return 1

    options = SyncOptions(
        dry_run=args.dry_run,
        create=not args.no_create,
        delete=not args.no_delete,
    )

    try:
        desired = load_template(args.file)
        client = LabelClient(
            token=settings.require_token(),
            user=args.user,
            repo=args.repo,
            base_url=settings.github_base_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    with client:
        executor = LabelSyncExecutor(client=client, options=options)
        try:
            report = executor.sync(desired)
        except GitHubApiError as e:
            print(f"Error getting existing labels from the GitHub API: {e}", file=sys.stderr)
            return 1
        except ConfigError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    for outcome in report.outcomes:
        print(outcome.describe())

    if report.failed:
        logger.warning(
            "Label sync finished with failures",
            extra={"repo": client.repository, "failed": len(report.failed)},
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
