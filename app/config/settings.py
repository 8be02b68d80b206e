"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the catalog API using Pydantic Settings.

A single cached Settings instance is shared by the whole application.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values (paths, CORS origins)

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        api_prefix: URL prefix for all REST routes
        products_file: Path to the products JSON document
        strict_store_loading: Fail loudly on an unparseable products document
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> print(settings.app_name)
        'Product Catalog API'
        >>> print(settings.products_path)
        PosixPath('data/products.json')
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog API",
        description="Display name for the application"
    )

    debug: bool = Field(
        default=True,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    api_prefix: str = Field(
        default="/api",
        description="URL prefix for REST routes"
    )

    # =========================================================================
    # STORAGE SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="data/products.json",
        description="Path to the products JSON document"
    )

    strict_store_loading: bool = Field(
        default=True,
        description="Treat an unparseable products document as a storage fault"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        """
        Normalize the API prefix.

        Raises:
            ValueError: If the prefix does not start with '/'
        """
        value = value.strip()
        if not value.startswith("/"):
            raise ValueError(f"API prefix must start with '/': {value!r}")
        return value.rstrip("/")

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def ensure_directories(self) -> None:
        """Create the directory holding the products document."""
        self.products_path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"debug={self.debug}, "
            f"products_file={self.products_file!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance

    Example:
        >>> settings = get_settings()
        >>> print(settings.api_prefix)
        '/api'
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
