"""Configuration data models."""

import os
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OMDbConfig(BaseModel):
    """OMDb API configuration."""

    api_key: str = Field(..., description="OMDb API key")
    base_url: str = Field(default="http://www.omdbapi.com/", description="OMDb API base URL")
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key and reject blanks."""
        v = os.path.expandvars(v).strip()
        if not v or v.startswith("${"):
            raise ValueError("OMDb API key must not be empty")
        return v


class FavoritesConfig(BaseModel):
    """Favorites storage configuration."""

    path: str = Field(default="data/favorites.json", description="Favorites JSON file path")
    page_size: int = Field(default=10, gt=0, description="Favorites per page")


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Listening address")
    port: int = Field(default=3001, gt=0, lt=65536, description="Listening port")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed cross-origin request sources",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        """Accept a comma-separated string of origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class FrontendConfig(BaseModel):
    """Frontend configuration."""

    api_url: str = Field(
        default="http://localhost:3001/movies", description="Base URL of the movies API"
    )
    page_size: int = Field(default=10, gt=0, description="Search results per page")
    cache_ttl_seconds: int = Field(default=300, gt=0, description="Query cache freshness window")
    request_timeout: float = Field(default=10.0, gt=0, description="API request timeout")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    omdb: OMDbConfig = Field(..., description="OMDb configuration")
    favorites: FavoritesConfig = Field(
        default_factory=FavoritesConfig, description="Favorites storage configuration"
    )
    server: ServerConfig = Field(default_factory=ServerConfig, description="Server configuration")
    frontend: FrontendConfig = Field(
        default_factory=FrontendConfig, description="Frontend configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
