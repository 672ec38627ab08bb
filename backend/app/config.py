"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Repo-root .env (dev); the process environment always wins
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # CWA open data (Central Weather Administration)
    cwa_api_key: str = ""
    cwa_api_base_url: str = "https://opendata.cwa.gov.tw/api"
    cwa_dataset_id: str = "F-C0032-001"  # 36-hour general forecast

    # Outbound HTTP timeout (seconds)
    request_timeout: float = 15.0

    # Deployment
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": str(_ENV_FILE), "extra": "ignore"}

    @property
    def has_api_key(self) -> bool:
        return bool(self.cwa_api_key.strip())

    @property
    def forecast_url(self) -> str:
        base = self.cwa_api_base_url.rstrip("/")
        return f"{base}/v1/rest/datastore/{self.cwa_dataset_id}"


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings once, on first use."""
    return Settings()
