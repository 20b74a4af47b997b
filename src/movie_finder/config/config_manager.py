"""Configuration management."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from ..utils.exceptions import ConfigurationError
from .models import Config, FrontendConfig

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "OMDB_API_KEY": ("omdb", "api_key"),
    "OMDB_BASE_URL": ("omdb", "base_url"),
    "CORS_ORIGIN": ("server", "cors_origins"),
    "HOST": ("server", "host"),
    "PORT": ("server", "port"),
    "MOVIE_FINDER_API_URL": ("frontend", "api_url"),
    "FAVORITES_PATH": ("favorites", "path"),
    "LOG_LEVEL": ("logging", "level"),
}


class ConfigManager:
    """Manages application configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None, load_env_file: bool = True):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file. If None, searches standard locations
                and falls back to environment variables only.
            load_env_file: Whether to read a ``.env`` file from the working directory.
        """
        self._config_path = config_path
        self._load_env_file = load_env_file
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Load and validate configuration.

        Returns:
            Validated configuration object.

        Raises:
            FileNotFoundError: If an explicit configuration file is missing.
            ConfigurationError: If configuration is invalid or the API key is missing.
            yaml.YAMLError: If YAML parsing fails.
        """
        if self._config is not None:
            return self._config

        raw_config = self._load_raw_config()

        if not (raw_config.get("omdb") or {}).get("api_key"):
            raise ConfigurationError("OMDB_API_KEY environment variable is not set")

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}")

        return self._config

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration object.
        """
        if self._config is None:
            return self.load_config()
        return self._config

    def load_frontend_config(self) -> FrontendConfig:
        """Load only the frontend section.

        The frontend talks to the movies API and never needs the OMDb key, so
        this does not require it.

        Returns:
            Validated frontend configuration.
        """
        raw_config = self._load_raw_config()

        try:
            return FrontendConfig(**(raw_config.get("frontend") or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Frontend configuration validation failed: {e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        """Read the configuration file, if any, and overlay the environment."""
        if self._load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        config_path = self._find_config_file()
        raw_config = self._load_yaml_file(config_path) if config_path else {}
        self._apply_env_overrides(raw_config)
        return raw_config

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations.

        Returns:
            Path to configuration file, or None if there is none.

        Raises:
            FileNotFoundError: If an explicitly given file does not exist.
        """
        if self._config_path is not None:
            if self._config_path.exists():
                return self._config_path
            raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

        search_paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "config.yaml",
        ]

        env_config = os.getenv("MOVIE_FINDER_CONFIG")
        if env_config:
            search_paths.insert(0, Path(env_config))

        for path in search_paths:
            if path.exists():
                return path

        return None

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML file with environment variable expansion.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML data with environment variables expanded.

        Raises:
            yaml.YAMLError: If YAML parsing fails.
        """
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        content = os.path.expandvars(content)

        try:
            result = yaml.safe_load(content)
            if result is None:
                return {}
            if not isinstance(result, dict):
                raise yaml.YAMLError(f"YAML file {path} must contain a dictionary at root level")
            return result
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}")

    @staticmethod
    def _apply_env_overrides(raw_config: Dict[str, Any]) -> None:
        """Overlay environment variables onto raw configuration data."""
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None or not value.strip():
                continue
            section_data = raw_config.get(section)
            if not isinstance(section_data, dict):
                section_data = {}
                raw_config[section] = section_data
            section_data[key] = value.strip()

    @classmethod
    def create_default_config(cls, output_path: Path) -> None:
        """Create a default configuration file.

        Args:
            output_path: Path where to create the configuration file.
        """
        default_config = {
            "omdb": {
                "api_key": "${OMDB_API_KEY}",
                "base_url": "http://www.omdbapi.com/",
                "timeout": 5,
            },
            "favorites": {
                "path": "data/favorites.json",
            },
            "server": {
                "host": "0.0.0.0",
                "port": 3001,
                "cors_origins": ["http://localhost:3000"],
            },
            "frontend": {
                "api_url": "http://localhost:3001/movies",
            },
            "logging": {
                "level": "INFO",
            },
        }

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(default_config, f, default_flow_style=False, indent=2, sort_keys=False)
