"""
Configuration settings for the Carrier Sales API.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Carrier Sales API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Security ===
    API_KEY: Optional[str] = None  # None disables API key checks on /api routes
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:3001"]

    # === Load Catalog ===
    LOADS_DATA_PATH: str = "data/loads.json"

    # === Carrier Registry ===
    CARRIER_REGISTRY: str = "static"  # "static" (allow-list) or "fmcsa"
    KNOWN_MC_NUMBERS: list[str] = ["123456", "789012", "345678", "901234"]
    FMCSA_BASE_URL: str = "https://mobile.fmcsa.dot.gov/qc/services"
    FMCSA_WEB_KEY: Optional[str] = None
    FMCSA_TIMEOUT: float = 10.0  # seconds

    # === Call Metrics ===
    METRICS_SOURCE: str = "static"  # "static" (fixed snapshot) or "http"
    METRICS_SOURCE_URL: Optional[str] = None
    METRICS_SOURCE_TIMEOUT: float = 5.0  # seconds

    # === Call Classifier ===
    CLASSIFIER_SEED: Optional[int] = None  # Fix call_duration output for demos

    # === Dashboard ===
    DASHBOARD_ENABLED: bool = True
    DASHBOARD_REFRESH_SECONDS: int = 30

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
