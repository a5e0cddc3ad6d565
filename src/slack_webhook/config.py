"""Configuration management with Pydantic Settings.

Settings are read from environment variables (and an optional ``.env``
file) once and cached for the life of the process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://hooks.slack.com/services"
DEFAULT_USERNAME = "webhookbot"
DEFAULT_ICON = ":grey_exclamation:"
DEFAULT_TIMEOUT = 10.0


class SlackSettings(BaseSettings):
    """Slack webhook client settings.

    Example:
        ```python
        from slack_webhook.config import get_settings

        settings = get_settings()
        print(settings.base_url)
        print(settings.timeout)
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="SLACK_WEBHOOK_BASE_URL",
        description="Base URL that webhook keys are appended to",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        alias="SLACK_WEBHOOK_TIMEOUT",
        description="HTTP request timeout in seconds",
        gt=0,
    )
    username: str = Field(
        default=DEFAULT_USERNAME,
        alias="SLACK_WEBHOOK_USERNAME",
        description="Default bot username",
    )
    icon_emoji: str = Field(
        default=DEFAULT_ICON,
        alias="SLACK_WEBHOOK_ICON",
        description="Default bot icon emoji",
    )
    api_key: SecretStr | None = Field(
        default=None,
        alias="SLACK_WEBHOOK_API_KEY",
        description="Webhook key used by the command line tool",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("SLACK_WEBHOOK_BASE_URL must be an HTTP(S) URL")
        return v.rstrip("/")

    def redacted_summary(self) -> dict[str, str]:
        """Get a summary of settings with secrets redacted."""
        return {
            "base_url": self.base_url,
            "timeout": str(self.timeout),
            "username": self.username,
            "icon_emoji": self.icon_emoji,
            "api_key": "(set)" if self.api_key else "(not set)",
            "log_level": self.log_level,
        }


@lru_cache(maxsize=1)
def get_settings() -> SlackSettings:
    """Get the settings singleton.

    Raises:
        ValidationError: If an environment variable has an invalid value.
    """
    return SlackSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when you need to reload settings with
    different environment variables.
    """
    get_settings.cache_clear()
