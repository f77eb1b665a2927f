"""
Configuration module for the Book API.

This module defines the Settings class, which loads environment variables
and provides application-wide configuration: database URL, environment,
logging level and the sizing of the read cache.

Usage:
    Import the `settings` object to access configuration throughout the project.
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        LOG_LEVEL (str): Root logging level used by the entry points.
        API_TITLE (str): Title shown in the OpenAPI documentation.
        CACHE_TTL_SECONDS (int): Lifetime of a cached read, in seconds.
        CACHE_MAX_ENTRIES (int): Maximum number of cached reads kept in memory.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bookapi.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    API_TITLE: str = "Book API"
    CACHE_TTL_SECONDS: int = 3600
    CACHE_MAX_ENTRIES: int = 1024

    @property
    def is_sqlite(self) -> bool:
        """
        Whether the configured database is SQLite.

        Returns:
            bool: True for `sqlite://` URLs.
        """
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
