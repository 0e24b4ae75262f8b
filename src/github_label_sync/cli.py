"""Console entrypoint.

The CLI is implemented in `github_label_sync.sync.main`; this module lets
`python -m github_label_sync.cli` work as well.
"""

from __future__ import annotations

from github_label_sync.sync.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
