"""
Application Settings
Load from environment variables
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ======================
    # Catalog
    # ======================
    CATALOG_FILE: Path = PROJECT_ROOT / "config" / "instruments.yml"

    # ======================
    # Request defaults
    # ======================
    DEFAULT_CAPITAL: float = 1000.0
    DEFAULT_PERIOD_MONTHS: int = 12
    MAX_CAPITAL: float = 1_000_000_000_000.0
    MAX_PERIOD_MONTHS: int = 1200

    # ======================
    # CORS
    # ======================
    CORS_ORIGINS: List[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
        "http://127.0.0.1:8081",
    ]

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
