"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock

import pytest

from movie_finder.config import ConfigManager
from movie_finder.config.config_manager import ENV_OVERRIDES
from movie_finder.core.interfaces import IOMDbService
from movie_finder.core.models import Movie, OMDbSearchResponse
from movie_finder.core.services import JsonFavoritesStore, MovieService
from movie_finder.infrastructure import Container


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("MOVIE_FINDER_CONFIG", raising=False)


@pytest.fixture
def favorites_path(tmp_path):
    """Location of the favorites file (not created)."""
    return tmp_path / "data" / "favorites.json"


@pytest.fixture
def write_favorites(favorites_path):
    """Write raw favorites records to the favorites file."""

    def _write(records):
        favorites_path.parent.mkdir(parents=True, exist_ok=True)
        favorites_path.write_text(json.dumps(records), encoding="utf-8")

    return _write


@pytest.fixture
def read_favorites(favorites_path):
    """Read the favorites file back as JSON."""

    def _read():
        return json.loads(favorites_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def temp_config_file(tmp_path, favorites_path):
    """Create a temporary configuration file."""
    config_content = f"""
omdb:
  api_key: "test-omdb-key"
  base_url: "http://omdb.test/"

favorites:
  path: "{favorites_path.as_posix()}"

server:
  port: 3001
  cors_origins:
    - "http://localhost:3000"

logging:
  level: "DEBUG"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file, load_env_file=False)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def favorites_store(config):
    """Favorites store writing into the temporary directory."""
    return JsonFavoritesStore(config)


@pytest.fixture
def mock_omdb_service():
    """Mock OMDb service."""
    service = AsyncMock(spec=IOMDbService)
    service.search.return_value = OMDbSearchResponse.empty()
    return service


@pytest.fixture
def movie_service(favorites_store, mock_omdb_service):
    """Movie service over the temporary store and the mock OMDb service."""
    return MovieService(favorites_store, mock_omdb_service)


@pytest.fixture
def container(config_manager, mock_omdb_service):
    """Create a test container with OMDb mocked out."""
    container = Container(config_manager)
    container.configure_default_services()
    container.register_instance(IOMDbService, mock_omdb_service)
    return container


@pytest.fixture
def sample_movie():
    """A favorite-ready movie."""
    return Movie(
        title="The Matrix",
        imdb_id="tt0133093",
        year=1999,
        poster="https://m.media-amazon.com/images/M/matrix.jpg",
    )


@pytest.fixture
def omdb_search_payload():
    """Raw OMDb search response for "batman"."""
    return {
        "Search": [
            {
                "Title": "Batman Begins",
                "Year": "2005",
                "imdbID": "tt0372784",
                "Type": "movie",
                "Poster": "https://m.media-amazon.com/images/M/begins.jpg",
            },
            {
                "Title": "Batman: The Animated Series",
                "Year": "1992–1995",
                "imdbID": "tt0103359",
                "Type": "movie",
                "Poster": "N/A",
            },
            {
                "Title": "Batman Unlimited",
                "Year": "",
                "imdbID": "tt4853102",
                "Type": "movie",
                "Poster": "",
            },
        ],
        "totalResults": "583",
        "Response": "True",
    }


@pytest.fixture
def omdb_search_response(omdb_search_payload):
    """Parsed OMDb search response for "batman"."""
    return OMDbSearchResponse.model_validate(omdb_search_payload)
