"""Configuration for label sync.

Configuration is loaded from:
- command-line flags (applied with `with_overrides`)
- environment variables
- and a local `.env` file (if present)

To avoid collisions with other tools that may also use `GITHUB_TOKEN`, this
project uses a dedicated token variable: `LABEL_SYNC_GITHUB_TOKEN`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_label_sync.sync.errors import ConfigError


class LabelSyncSettings(BaseSettings):
    """Settings for a label sync run.

    Environment variables:
    - LABEL_SYNC_GITHUB_TOKEN
    - GITHUB_BASE_URL             (optional)
    - LOG_LEVEL                   (optional)
    - LABEL_SYNC_REQUEST_TIMEOUT  (optional)
    - LABEL_SYNC_USER_AGENT       (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `LabelSyncSettings(_env_file=path_to_env)`.
    """

    # The token may also come from `--token`, so it is only enforced by `require_token()`.
    github_token: str = Field(
        default="",
        validation_alias="LABEL_SYNC_GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    # WARNING keeps a run that changes nothing silent.
    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    request_timeout: float | None = Field(
        default=None,
        gt=0,
        validation_alias="LABEL_SYNC_REQUEST_TIMEOUT",
        description="Per-request timeout in seconds (None uses the transport default)",
    )
    user_agent: str = Field(
        default="github-label-sync",
        validation_alias="LABEL_SYNC_USER_AGENT",
        description="User-Agent header sent with every API request",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("github_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("https://", "http://")):
            raise ValueError("GITHUB_BASE_URL must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    def with_overrides(self, **overrides: Any) -> LabelSyncSettings:
        """Return a validated copy with `overrides` applied by field name.

        `None` values are skipped so unset CLI flags keep the loaded value.
        """

        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(values)

    def require_token(self) -> str:
        """Return the configured token or raise if none was provided."""

        token = self.github_token.strip()
        if not token:
            raise ConfigError("A GitHub token is required (--token or LABEL_SYNC_GITHUB_TOKEN)")
        return token
