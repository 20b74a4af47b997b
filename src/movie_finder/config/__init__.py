"""Configuration management module."""

from .config_manager import ConfigManager
from .models import (
    Config,
    FavoritesConfig,
    FrontendConfig,
    LoggingConfig,
    OMDbConfig,
    ServerConfig,
)

__all__ = [
    "ConfigManager",
    "Config",
    "OMDbConfig",
    "FavoritesConfig",
    "ServerConfig",
    "FrontendConfig",
    "LoggingConfig",
]
