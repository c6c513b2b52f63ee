"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.
The documentation catalog itself lives in a YAML file referenced by
``catalog_path`` and is loaded by the container, not here.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from docshelf.core.config import settings

    storage = settings.storage_path
    if settings.is_development:
        ...
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from docshelf.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8000,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Docshelf",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API / OpenAPI configuration
    api_title: str = Field(
        default="Docshelf API",
        description="Title published in the OpenAPI document",
    )
    api_base_url: str | None = Field(
        default=None,
        description="Public base URL published as the OpenAPI server",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Documentation storage
    catalog_path: Path = Field(
        default=Path("config/catalog.yaml"),
        description="YAML file describing projects, version groups and versions",
    )
    storage_path: Path = Field(
        default=Path("storage"),
        description="Root directory holding {project}/{version}.zip|.jar archives",
    )
    archive_suffixes: Annotated[list[str], NoDecode] = Field(
        default=[".zip", ".jar"],
        description="Archive file suffixes tried in order (comma-separated)",
    )
    stream_chunk_size: int = Field(
        default=64 * 1024,
        description="Bytes per chunk when streaming archive entries",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string or None.

        Returns:
            str | None: URL without trailing slash.
        """
        if v is None:
            return None
        return v.rstrip("/") or None

    @field_validator("archive_suffixes", mode="before")
    @classmethod
    def parse_archive_suffixes(cls, v: str | list[str]) -> list[str]:
        """
        Parse comma-separated archive suffixes.

        Suffixes without a leading dot get one (``zip`` -> ``.zip``).

        Args:
            v: Comma-separated string or list of suffixes.

        Returns:
            list[str]: Suffixes in lookup order.

        Raises:
            ValueError: If no suffix remains after parsing.
        """
        items = v.split(",") if isinstance(v, str) else v
        suffixes = []
        for item in items:
            item = item.strip()
            if not item:
                continue
            suffixes.append(item if item.startswith(".") else f".{item}")
        if not suffixes:
            raise ValueError("archive_suffixes must contain at least one suffix")
        return suffixes

    @field_validator("stream_chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """
        Validate the streaming chunk size is positive.

        Raises:
            ValueError: If the size is zero or negative.
        """
        if v <= 0:
            raise ValueError("stream_chunk_size must be positive")
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
