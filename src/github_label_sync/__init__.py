"""GitHub label sync.

Converges the labels of a GitHub repository to a YAML template:
- configuration loaded from flags, environment and `.env`
- structured logging
- a pure reconciler plus a small REST client for the label endpoints
"""

__version__ = "0.1.0"

from github_label_sync.labels import ActionKind, Label, LabelAction
from github_label_sync.sync.config import LabelSyncSettings

__all__ = ["__version__", "ActionKind", "Label", "LabelAction", "LabelSyncSettings"]
