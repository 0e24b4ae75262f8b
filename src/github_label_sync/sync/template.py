"""Label template loading.

A template is a YAML list of mappings, each with a `name` and a `color`:

    - name: bug
      color: fc2929
    - name: duplicate
      color: cccccc

Other keys are ignored. Colors may carry a leading '#' and any case; they are
normalized to six lowercase hex digits, which is how GitHub returns them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from github_label_sync.labels import Label, ensure_unique_names, normalize_color
from github_label_sync.sync.errors import ConfigError, TemplateError

logger = logging.getLogger(__name__)


def _parse_item(item: Any, index: int) -> Label:
    if not isinstance(item, dict):
        raise TemplateError(f"item {index} must be a mapping with the keys `name` and `color`")

    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        raise TemplateError(f"item {index} is missing a `name`")

    color = item.get("color")
    if isinstance(color, int) and not isinstance(color, bool):
        # YAML reads unquoted digit-only colors as integers, octal when zero-padded.
        raise TemplateError(
            f"label {name!r}: quote the color, unquoted digit-only colors are read as numbers"
        )
    if not isinstance(color, str):
        raise TemplateError(f"label {name!r} is missing a `color`")

    try:
        normalized = normalize_color(color)
    except ConfigError as e:
        raise TemplateError(f"label {name!r}: {e}") from e

    return Label(name=name, color=normalized)


def parse_template(data: Any) -> list[Label]:
    """Validate already-loaded template data and return the desired labels in order."""

    if data is None:
        raise TemplateError("expected the template to have some data")
    if not isinstance(data, list):
        raise TemplateError("expected the template to be a single list of labels")

    labels = [_parse_item(item, index) for index, item in enumerate(data)]
    ensure_unique_names(labels)
    return labels


def load_template(path: Path) -> list[Label]:
    """Read and validate a YAML label template.

    Raises:
        TemplateError: If the file cannot be read, is not valid YAML, or is malformed.
        DuplicateLabelError: If a label name appears more than once.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"failed to read template ({e.strerror or e})", path=str(path)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise TemplateError(f"failed to parse YAML data: {e}", path=str(path)) from e

    try:
        labels = parse_template(data)
    except TemplateError as e:
        raise TemplateError(str(e), path=str(path)) from e

    logger.debug("Template loaded", extra={"path": str(path), "label_count": len(labels)})
    return labels
