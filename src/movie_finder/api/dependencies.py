"""FastAPI dependencies resolved from the application container."""

from fastapi import Request

from ..config import Config
from ..core.interfaces import IMovieService
from ..infrastructure import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_config(request: Request) -> Config:
    return get_container(request).get_config()


def get_movie_service(request: Request) -> IMovieService:
    return get_container(request).get(IMovieService)  # type: ignore
