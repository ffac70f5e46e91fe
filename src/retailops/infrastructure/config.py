"""Application settings.

Loaded from environment variables (or a ``.env`` file) with Pydantic
Settings, with defaults suitable for local development.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Application ----------------------------------------------------------
    APP_NAME: str = "RetailOps API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # --- Server ---------------------------------------------------------------
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    # --- Logging --------------------------------------------------------------
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # --- Data -----------------------------------------------------------------
    SEED_SAMPLE_DATA: bool = Field(default=True)

    # --- CLI ------------------------------------------------------------------
    API_URL: str = Field(default="http://localhost:3000")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
