"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend API configuration
    api_base_url: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the routing backend (without trailing slash)",
    )
    request_timeout_seconds: float = Field(
        default=60,
        description="Seconds to wait for a backend response before giving up",
    )

    # Display configuration
    timezone: str | None = Field(
        default=None,
        description="IANA timezone for displayed times (e.g., 'Europe/Warsaw'). Unset means local time.",
    )

    # Session configuration
    history_limit: int = Field(
        default=50,
        description="Maximum number of journeys kept in the session history (0 for unbounded)",
    )

    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING or ERROR")

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate the timezone is a known IANA name."""
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("history_limit")
    @classmethod
    def validate_history_limit(cls, v: int) -> int:
        """Validate the history limit is not negative."""
        if v < 0:
            raise ValueError("history_limit must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of DEBUG, INFO, WARNING, ERROR."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def get_tzinfo(self) -> ZoneInfo | None:
        """Timezone for displayed times, or None for the local timezone."""
        return ZoneInfo(self.timezone) if self.timezone else None
