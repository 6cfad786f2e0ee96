"""
Application configuration loaded from environment variables.

Uses Pydantic Settings to:
1. Read from .env file automatically
2. Validate values at startup
3. Provide type-safe access throughout the app

Usage:
    from assessment_api.config import settings
    print(settings.DATABASE_URL)

Every setting has a development default, so the API starts without a
.env file. In production, set at least SECRET_KEY and DATABASE_URL.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All application configuration in one place."""

    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file
        env_file_encoding="utf-8",
        case_sensitive=True,     # ENV_VAR must match exactly
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def prefer_dotenv_over_empty_env(cls, data):
        """If an env var is empty but .env has a value, use the .env value.

        Pydantic Settings prioritizes real env vars over .env file values,
        so an exported-but-empty SECRET_KEY would shadow the real one.
        """
        from dotenv import dotenv_values

        dotenv_vals = dotenv_values(".env")
        for key, dotenv_value in dotenv_vals.items():
            if dotenv_value and (key not in data or not data.get(key)):
                data[key] = dotenv_value
        return data

    # --- Database ---
    # Default is an in-memory SQLite database: users live as long as the process.
    DATABASE_URL: str = "sqlite+aiosqlite://"
    DB_ECHO: bool = False

    # --- Security ---
    SECRET_KEY: str = "dev-secret-key-change-me-in-production-0123456789"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60
    MIN_PASSWORD_LENGTH: int = 6

    # --- Reports ---
    REPORTS_DIR: str = "reports"

    # --- Application ---
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Singleton instance, import this everywhere
settings = Settings()
