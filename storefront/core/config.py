"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    session_cookie_name: str = "storefront_session"
    session_max_age_hours: int = 24

    # Image search (Unsplash-compatible)
    image_search_base_url: str = "https://api.unsplash.com"
    image_search_access_key: Optional[str] = None
    search_price_min: int = 500
    search_price_max: int = 1000

    # Email delivery (EmailJS-compatible)
    email_base_url: str = "https://api.emailjs.com"
    email_service_id: Optional[str] = None
    email_template_id: Optional[str] = None
    email_public_key: Optional[str] = None
    email_private_key: Optional[str] = None

    http_timeout: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def image_search_configured(self) -> bool:
        """Check if the image search credential is configured"""
        return bool(self.image_search_access_key)

    @property
    def email_configured(self) -> bool:
        """Check if email delivery is configured"""
        return all([
            self.email_service_id,
            self.email_template_id,
            self.email_public_key,
        ])


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
