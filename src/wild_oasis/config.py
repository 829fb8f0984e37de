"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from wild_oasis.adapters.google_oauth_client import (
    GOOGLE_AUTHORIZE_URL,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    session_secret: str
    google_client_id: str
    google_client_secret: str
    google_authorize_url: str = GOOGLE_AUTHORIZE_URL
    google_token_url: str = GOOGLE_TOKEN_URL
    google_userinfo_url: str = GOOGLE_USERINFO_URL
    base_url: str = "http://localhost:8000"
    login_path: str = "/login"
    view_ttl_seconds: int = 300
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def oauth_redirect_uri(self) -> str:
        """Return the absolute callback URL registered with Google."""
        return f"{self.base_url.rstrip('/')}/auth/callback"
