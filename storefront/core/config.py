"""Storefront Configuration"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "INFO"

    # Persistence
    storage_backend: Literal["memory", "json"] = "memory"
    storage_path: str = "data/storefront.json"
    seed_catalog: bool = True

    # Display
    currency_symbol: str = "₩"
    currency_unit: str = "원"

    # Admin access (open when unset)
    admin_api_key: Optional[str] = None

    @property
    def admin_protected(self) -> bool:
        """Check if admin routes require a key"""
        return bool(self.admin_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
