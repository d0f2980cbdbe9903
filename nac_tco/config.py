"""Application configuration."""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator settings from environment (``NAC_TCO_`` prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NAC_TCO_",
        case_sensitive=False,
    )

    # Comparison parties
    reference_vendor: str = "portnox"
    default_vendor: str = "cisco"

    # Organization defaults
    default_organization_size: str = "medium"
    default_industry: str = "technology"
    default_years_to_project: int = 3
    max_years_to_project: int = 10

    # Unit costs
    default_fte_cost: float = 100000.0
    default_downtime_cost: float = 5000.0

    # Application
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
