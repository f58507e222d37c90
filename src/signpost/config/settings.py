"""Application settings loaded from the environment."""

import typing as t
from enum import Enum

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.credentials import Credentials
from ..domain.retry import RetryPolicy

if t.TYPE_CHECKING:
    from ..retry.observers import RetryObserver


class Environment(Enum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings container used to bootstrap the app.

    Values come from ``SIGNPOST_*`` environment variables. Delays are in
    seconds.
    """

    model_config = SettingsConfigDict(env_prefix="SIGNPOST_", frozen=True)

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO

    # HTTP
    timeout: float = Field(default=30.0, gt=0, description="Request timeout")

    # Retry defaults
    max_attempts: int = Field(default=3, ge=1)
    initial_delay: float = Field(default=1.0, ge=0)
    max_delay: float = Field(default=10.0, ge=0)
    backoff_factor: float = Field(default=2.0, ge=1)

    def retry_policy(self, on_retry: "RetryObserver | None" = None) -> RetryPolicy:
        """Build a RetryPolicy from the configured defaults."""
        return RetryPolicy(
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
            backoff_factor=self.backoff_factor,
            on_retry=on_retry,
        )


class CredentialSettings(BaseSettings):
    """OAuth credentials read from ``OAUTH_*`` environment variables.

    Missing values default to empty strings; the signer rejects them
    when a request is signed, not at load time.
    """

    model_config = SettingsConfigDict(env_prefix="OAUTH_", frozen=True)

    consumer_key: SecretStr = SecretStr("")
    consumer_secret: SecretStr = SecretStr("")
    access_token: SecretStr = SecretStr("")
    access_secret: SecretStr = SecretStr("")

    def to_credentials(self) -> Credentials:
        return Credentials(
            consumer_key=self.consumer_key.get_secret_value(),
            consumer_secret=self.consumer_secret.get_secret_value(),
            access_token=self.access_token.get_secret_value(),
            access_secret=self.access_secret.get_secret_value(),
        )


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    CLI options that were not given arrive as None and must not mask
    environment values or defaults.
    """
    return Settings(
        **{key: value for key, value in overrides.items() if value is not None}
    )
