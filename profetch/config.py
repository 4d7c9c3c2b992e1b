"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings


_HTTP_URL = TypeAdapter(AnyHttpUrl)


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class FetcherConfig(BaseSettings):
    """Configuration for the profile fetcher."""

    # API settings
    base_url: str = "http://localhost:8000"
    profile_path: str = "/me"

    # HTTP client settings
    timeout_seconds: float = 5.0
    user_agent: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "PROFETCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip()
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"base_url must be an http(s) URL with a host: {e.errors()[0]['msg']}") from e
        return value.rstrip("/")

    @field_validator("profile_path")
    @classmethod
    def _check_profile_path(cls, value: str) -> str:
        return "/" + value.strip().lstrip("/")

    @property
    def profile_url(self) -> str:
        """Absolute URL of the profile endpoint."""
        return f"{self.base_url}{self.profile_path}"
