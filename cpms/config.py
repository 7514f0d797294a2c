"""Central application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./cpms.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Naive start dates from clients are read in this zone before UTC conversion.
    LOCAL_TIMEZONE: str = "UTC"

    # Creator used for project writes made without a bearer token.
    DEFAULT_CREATOR_ID: int = 1
    WRITE_REQUIRES_AUTH: bool = False

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
