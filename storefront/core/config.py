"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Event Storefront"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8001
    currency: str = "NGN"

    # CORS
    cors_origins: list[str] = ["*"]

    # Admin back-office (shared secret + session cookie)
    admin_password: Optional[str] = None
    admin_cookie_name: str = "admin_session"
    admin_session_max_age: int = 60 * 60 * 24
    cookie_secure: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def admin_enabled(self) -> bool:
        """Admin login is only possible when a password is configured"""
        return bool(self.admin_password)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
