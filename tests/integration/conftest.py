"""Integration test fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient

from movie_finder.api import create_app


@pytest.fixture
def app(container):
    """Application wired to the test container."""
    return create_app(container)


@pytest.fixture
def client(app):
    """HTTP client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client
