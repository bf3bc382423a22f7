# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.MONGODB_URI)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a default, so a bare environment still starts the app
# against local Redis and MongoDB instances.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Server Binding
    # -------------------------------------------------------------------------

    BIND_ADDR: str = Field(
        default="0.0.0.0",
        description="Address to bind the HTTP server to"
    )

    BIND_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP server"
    )

    # -------------------------------------------------------------------------
    # Redis Configuration (cache)
    # -------------------------------------------------------------------------

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the cache"
    )

    REDIS_CONNECT_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait when opening a Redis connection"
    )

    # -------------------------------------------------------------------------
    # MongoDB Configuration (document store)
    # -------------------------------------------------------------------------

    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )

    MONGODB_DATABASE: str = Field(
        default="template",
        min_length=1,
        description="Database holding the users collection"
    )

    MONGODB_CONNECT_TIMEOUT_MS: int = Field(
        default=5000,
        ge=1,
        description="Milliseconds to wait for server selection and connect"
    )

    MONGODB_CREATE_INDEXES: bool = Field(
        default=False,
        description="Create a unique index on users.email at startup"
    )

    # -------------------------------------------------------------------------
    # Templates and Static Assets
    # -------------------------------------------------------------------------

    TEMPLATES_DIR: str = Field(
        default="./templates",
        description="Directory containing Jinja2 templates"
    )

    ASSETS_DIR: str = Field(
        default="./assets",
        description="Directory served under /assets"
    )

    APP_TITLE: str = Field(
        default="Python web starter",
        description="Title rendered on the home page"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="DEBUG",
        description="Root log level"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables fall back to defaults
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
