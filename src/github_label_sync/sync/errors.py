"""Exception hierarchy for label sync.

Setup failures (settings, template, initial listing) abort the run. Failures
raised while applying a single action are recorded on that action's outcome.
"""

from __future__ import annotations


class LabelSyncError(Exception):
    """Base class for all label sync errors."""


class ConfigError(LabelSyncError):
    """Invalid configuration or template content."""


class TemplateError(ConfigError):
    """The label template could not be read or is malformed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class DuplicateLabelError(ConfigError):
    """The desired label set declares the same name more than once."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Duplicate label names in template: {', '.join(names)}")


class GitHubApiError(LabelSyncError):
    """Base class for failures talking to the GitHub REST API."""


class TransportError(GitHubApiError):
    """The request never produced an HTTP response (DNS, TLS, connection reset...)."""


class UnexpectedStatusError(GitHubApiError):
    """GitHub answered with a status code other than the one the call requires.

    Authentication failures (401/403) surface here as well; the raw response
    body is kept for diagnostics.
    """

    def __init__(self, *, method: str, url: str, status_code: int, body: str) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"{method} {url} returned HTTP {status_code}: {body}")


class DecodeError(GitHubApiError):
    """The response body did not have the expected JSON shape."""

    def __init__(self, message: str, *, body: str) -> None:
        self.body = body
        super().__init__(f"{message}: {body}")
