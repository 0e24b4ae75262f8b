"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from github_label_sync.sync.github.client import LabelClient


def _response(status_code: int, payload: Any = None, *, text: str | None = None) -> Mock:
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text if text is not None else ("" if payload is None else repr(payload))
    resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build minimal stand-ins for `requests.Response`."""
    return _response


@pytest.fixture
def session() -> Mock:
    """Provide a mocked `requests.Session` with a real headers dict."""
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def client_factory(session: Mock) -> Callable[..., LabelClient]:
    """Build clients for octo-org/octo-repo on top of the mocked session."""

    def _factory(**kwargs: Any) -> LabelClient:
        params: dict[str, Any] = {
            "token": "test-token",
            "user": "octo-org",
            "repo": "octo-repo",
            "session": session,
        }
        params.update(kwargs)
        return LabelClient(**params)

    return _factory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run with no label sync variables set and no `.env` in the working directory."""
    for name in (
        "LABEL_SYNC_GITHUB_TOKEN",
        "GITHUB_BASE_URL",
        "LOG_LEVEL",
        "LABEL_SYNC_REQUEST_TIMEOUT",
        "LABEL_SYNC_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
