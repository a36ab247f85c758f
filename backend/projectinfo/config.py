from functools import lru_cache
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

# Names understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    PORT: Optional[int] = None  # Required to serve, see load_settings()
    HOST: str = "0.0.0.0"
    GITHUB_API_URL: str = "https://api.github.com"
    EXPECTED_HOST: str = "github.com"
    UPSTREAM_TIMEOUT: float = 10.0
    REJECT_STATUS_CODE: int = 200
    LOG_LEVEL: str = "INFO"

    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(env_file=["../.env", ".env"], env_file_encoding="utf-8", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def listen_address(self) -> str:
        return f"{self.HOST}:{self.PORT}"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings() -> Settings:
    """
    Settings for running the server. PORT must be set.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
    if settings.PORT is None:
        raise ConfigurationError("$PORT not set")
    return settings
