"""GitHub REST client for one repository's labels.

This intentionally wraps a single `requests.Session` so the sync logic never
builds URLs or inspects responses itself, and so tests can inject a session.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from github_label_sync.labels import Label
from github_label_sync.sync.errors import (
    ConfigError,
    DecodeError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"

# GitHub caps a page at 100 items; anything past the first page is not fetched.
_PER_PAGE = 100


class LabelClient:
    """Create, list, update and delete labels of `{user}/{repo}`.

    Every request carries the same authorization and user-agent headers. There
    are no retries; each call either succeeds with the one status code the
    endpoint documents or raises.
    """

    def __init__(
        self,
        *,
        token: str,
        user: str,
        repo: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = "github-label-sync",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ConfigError("GitHub token is required")
        user = user.strip().strip("/")
        repo = repo.strip().strip("/")
        if not user or "/" in user:
            raise ConfigError(f"Invalid repository owner: {user!r}")
        if not repo or "/" in repo:
            raise ConfigError(f"Invalid repository name: {repo!r}")

        self._user = user
        self._repo = repo
        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": user_agent,
            }
        )

    def __enter__(self) -> LabelClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def repository(self) -> str:
        """Return the configured repository name ("owner/repo")."""

        return f"{self._user}/{self._repo}"

    @property
    def labels_url(self) -> str:
        return f"{self._rest_base_url}/repos/{self._user}/{self._repo}/labels"

    def label_url(self, name: str) -> str:
        """Derive the locator of a label that was not fetched from GitHub."""

        if not name:
            raise ConfigError("Label name must be non-empty")
        return f"{self.labels_url}/{quote(name, safe='')}"

    def _locator(self, label: Label) -> str:
        return label.url or self.label_url(label.name)

    @staticmethod
    def _payload(label: Label) -> dict[str, str]:
        return {"name": label.name, "color": label.color}

    def _request(
        self,
        method: str,
        url: str,
        *,
        expected_status: int,
        **kwargs: Any,
    ) -> requests.Response:
        try:
            resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if resp.status_code != expected_status:
            raise UnexpectedStatusError(
                method=method, url=url, status_code=resp.status_code, body=resp.text
            )
        return resp

    @staticmethod
    def _parse_label(item: object, *, body: str) -> Label:
        if not isinstance(item, dict):
            raise DecodeError("Unexpected labels response: item is not an object", body=body)
        name = item.get("name")
        color = item.get("color")
        url = item.get("url")
        if not isinstance(name, str) or not name:
            raise DecodeError("Unexpected labels response: missing name", body=body)
        if not isinstance(color, str):
            raise DecodeError("Unexpected labels response: missing color", body=body)
        if not isinstance(url, str) or not url.strip():
            raise DecodeError("Unexpected labels response: missing url", body=body)
        # Compared against normalized template colors.
        return Label(name=name, color=color.lower(), url=url)

    def list_labels(self) -> list[Label]:
        """Return the repository's labels in the order GitHub lists them."""

        resp = self._request(
            "GET", self.labels_url, expected_status=200, params={"per_page": _PER_PAGE}
        )
        body = resp.text
        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"Labels response is not JSON ({e})", body=body) from e
        if not isinstance(payload, list):
            raise DecodeError("Unexpected labels response: expected a JSON array", body=body)

        labels = [self._parse_label(item, body=body) for item in payload]
        logger.debug(
            "Labels fetched", extra={"repo": self.repository, "label_count": len(labels)}
        )
        return labels

    def create_label(self, label: Label) -> None:
        self._request("POST", self.labels_url, expected_status=201, json=self._payload(label))
        logger.info(
            "Label created",
            extra={"repo": self.repository, "label": label.name, "color": label.color},
        )

    def update_label(self, label: Label) -> None:
        """PATCH the label at its locator with the desired name and color."""

        self._request("PATCH", self._locator(label), expected_status=200, json=self._payload(label))
        logger.info(
            "Label updated",
            extra={"repo": self.repository, "label": label.name, "color": label.color},
        )

    def delete_label(self, label: Label) -> None:
        self._request("DELETE", self._locator(label), expected_status=204)
        logger.info("Label deleted", extra={"repo": self.repository, "label": label.name})

    def close(self) -> None:
        self._session.close()
