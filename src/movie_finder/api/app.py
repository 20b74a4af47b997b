"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..infrastructure import Container
from .errors import register_exception_handlers
from .routes import router

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Create the movies API application.

    Args:
        container: Service container. If None, one is built from the environment
            with the default services.

    Returns:
        Configured application.

    Raises:
        ConfigurationError: If the configuration is invalid, e.g. the OMDb API key is missing.
    """
    if container is None:
        container = Container()
        container.configure_default_services()

    # Fails fast when the API key is missing
    config = container.get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Movie Finder API started, favorites at {config.favorites.path}")
        yield
        await container.close()
        logger.info("Movie Finder API stopped")

    app = FastAPI(title="Movie Finder API", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
        allow_credentials=True,
    )

    register_exception_handlers(app)
    app.include_router(router)

    return app
