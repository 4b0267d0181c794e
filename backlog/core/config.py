from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # e.g. https://example.backlog.com
    BACKLOG_BASE_URL: Optional[str] = None
    BACKLOG_API_KEY: Optional[str] = None  # sent as ?apiKey=
    BACKLOG_ACCESS_TOKEN: Optional[str] = None  # OAuth 2.0 Bearer token
    BACKLOG_TIMEOUT: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
