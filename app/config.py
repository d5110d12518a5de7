"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before regular access tokens expire",
        gt=0,
    )
    remember_me_expire_days: int = Field(
        default=7,
        description="Number of days before 'remember me' access tokens expire",
        gt=0,
    )
    data_file: str = Field(
        default="db.json",
        description="Path of the JSON document holding users, tasks and notifications",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used for timestamps, due dates and the daily summary hour",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    scheduler_enabled: bool = Field(
        default=True,
        description="Run the due date scanner and daily summary in the background",
    )
    reminder_interval_seconds: float = Field(
        default=3600,
        description="Seconds between two reminder scanner ticks",
        gt=0,
    )
    daily_summary_hour: int = Field(
        default=9,
        description=(
            "Local hour from which the once-a-day summaries are emitted on the "
            "next scanner tick"
        ),
        ge=0,
        le=23,
    )
    suppress_repeat_reminders: bool = Field(
        default=False,
        description=(
            "Emit due/overdue reminders only once per task instead of on every "
            "scanner tick"
        ),
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
