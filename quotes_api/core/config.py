import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "quotes-api"
    API_PREFIX: str = ""

    # Embedded SQLite file by default; any SQLAlchemy URL is accepted.
    DATABASE_URL: str = "sqlite+pysqlite:///./quotes.db"
    DB_ECHO: bool = False
    DB_AUTO_CREATE: bool = True

    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _known_log_level(cls, value) -> str:
        level = str(value or "").strip().upper()
        # Unknown names fall back to INFO instead of failing at import.
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
