from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "Goshinkai Match"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # "substring" keeps the historical behaviour, "token" is the stricter matcher
    TAG_MATCH_STRATEGY: Literal["substring", "token"] = "substring"

    DEFAULT_RECOMMENDATION_LIMIT: int = 5
    MAX_RECOMMENDATION_LIMIT: int = 50


settings = Settings()

APP_VERSION = __version__
