"""Test configuration management."""

from pathlib import Path

import pytest

from movie_finder.config import Config, ConfigManager
from movie_finder.utils import ConfigurationError


def test_config_manager_loads_config(config_manager, favorites_path):
    """Test that config manager loads configuration correctly."""
    config = config_manager.load_config()

    assert isinstance(config, Config)
    assert config.omdb.api_key == "test-omdb-key"
    assert config.omdb.timeout == 5.0
    assert config.favorites.path == favorites_path.as_posix()
    assert config.server.cors_origins == ["http://localhost:3000"]
    assert config.logging.level == "DEBUG"


def test_config_manager_caches_config(config_manager):
    """Test that config manager caches loaded configuration."""
    config1 = config_manager.load_config()
    config2 = config_manager.get_config()

    assert config1 is config2


def test_config_manager_missing_file():
    """Test that config manager raises error for missing file."""
    config_manager = ConfigManager(Path("nonexistent.yaml"), load_env_file=False)

    with pytest.raises(FileNotFoundError):
        config_manager.load_config()


def test_missing_api_key_refuses_to_load(tmp_path, monkeypatch):
    """Without an OMDb API key there is no configuration."""
    monkeypatch.chdir(tmp_path)
    config_manager = ConfigManager(load_env_file=False)

    with pytest.raises(ConfigurationError, match="OMDB_API_KEY"):
        config_manager.load_config()


def test_unexpanded_api_key_is_rejected(tmp_path):
    """A ${VAR} placeholder left unexpanded is not an API key."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text('omdb:\n  api_key: "${MOVIE_FINDER_TEST_UNSET_KEY}"\n')

    with pytest.raises(ConfigurationError):
        ConfigManager(config_file, load_env_file=False).load_config()


def test_environment_only_configuration(tmp_path, monkeypatch):
    """All settings can come from the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OMDB_API_KEY", "env-key")
    monkeypatch.setenv("CORS_ORIGIN", "http://a.test, http://b.test")
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("MOVIE_FINDER_API_URL", "http://api.test/movies")

    config = ConfigManager(load_env_file=False).load_config()

    assert config.omdb.api_key == "env-key"
    assert config.server.cors_origins == ["http://a.test", "http://b.test"]
    assert config.server.port == 4000
    assert config.frontend.api_url == "http://api.test/movies"
    assert config.favorites.path == "data/favorites.json"


def test_environment_overrides_file(config_manager, monkeypatch):
    """Environment variables win over the configuration file."""
    monkeypatch.setenv("OMDB_API_KEY", "override-key")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    config = config_manager.load_config()

    assert config.omdb.api_key == "override-key"
    assert config.logging.level == "WARNING"


def test_config_validation_invalid_port(tmp_path):
    """Test config validation with an out of range port."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text('omdb:\n  api_key: "key"\nserver:\n  port: 70000\n')

    with pytest.raises(ConfigurationError):
        ConfigManager(config_file, load_env_file=False).load_config()


def test_load_frontend_config_without_api_key(tmp_path, monkeypatch):
    """The frontend does not need the OMDb key."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MOVIE_FINDER_API_URL", "http://backend:3001/movies")

    frontend = ConfigManager(load_env_file=False).load_frontend_config()

    assert frontend.api_url == "http://backend:3001/movies"
    assert frontend.cache_ttl_seconds == 300
    assert frontend.page_size == 10


def test_create_default_config(tmp_path, monkeypatch):
    """Test creating default configuration file."""
    output_path = tmp_path / "default_config.yaml"
    monkeypatch.setenv("OMDB_API_KEY", "generated-key")

    ConfigManager.create_default_config(output_path)

    assert output_path.exists()

    config = ConfigManager(output_path, load_env_file=False).load_config()
    assert isinstance(config, Config)
    assert config.omdb.api_key == "generated-key"
    assert config.server.port == 3001
