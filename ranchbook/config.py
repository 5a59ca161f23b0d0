from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Ranchbook"
    ENVIRONMENT: str = "local"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./ranchbook.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Sessions
    # ==============================
    SESSION_SECRET: Optional[str] = None
    SESSION_COOKIE: str = "ranchbook_session"
    SESSION_TTL_SECONDS: int = 24 * 60 * 60

    # ==============================
    # Identity provider
    # ==============================
    DEFAULT_ADMIN_EMAILS: Optional[str] = None
    IDENTITY_JWT_SECRET: Optional[str] = None
    IDENTITY_JWT_ALGORITHM: str = "HS256"
    IDENTITY_JWT_AUDIENCE: Optional[str] = None
    IDENTITY_JWT_ISSUER: Optional[str] = None

    # ==============================
    # Health tasks
    # ==============================
    UPCOMING_WINDOW_DAYS: int = 7

    def default_admin_emails(self) -> list[str]:
        emails = []
        if self.DEFAULT_ADMIN_EMAILS:
            for value in self.DEFAULT_ADMIN_EMAILS.split(","):
                value = value.strip()
                if value:
                    emails.append(value)
        return emails


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
