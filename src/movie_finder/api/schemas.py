"""Request and response schemas for the HTTP API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from ..core.models import FavoritesPage, Movie, SearchPage


class FavoriteRequest(BaseModel):
    """Body of POST /movies/favorites."""

    title: StrictStr = Field(..., description="Movie title")
    imdb_id: StrictStr = Field(..., alias="imdbID", description="IMDb ID")
    year: StrictInt = Field(..., ge=0, description="Release year")
    poster: Optional[StrictStr] = Field(None, description="Poster image URL")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("title", "imdb_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty text fields."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    def to_movie(self) -> Movie:
        """Convert to a favorites record."""
        return Movie(title=self.title, imdb_id=self.imdb_id, year=self.year, poster=self.poster)


class SearchResponse(BaseModel):
    """Envelope for GET /movies/search."""

    data: SearchPage


class FavoritesResponse(BaseModel):
    """Envelope for GET /movies/favorites/list."""

    data: FavoritesPage


class FavoriteAdded(BaseModel):
    """Payload confirming an added favorite."""

    message: str = "Movie added to favorites"
    movie: Movie


class FavoriteAddedResponse(BaseModel):
    """Envelope for POST /movies/favorites."""

    data: FavoriteAdded


class MessagePayload(BaseModel):
    """Payload carrying only a message."""

    message: str


class MessageResponse(BaseModel):
    """Envelope for responses that only carry a message."""

    data: MessagePayload


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    status_code: int = Field(..., alias="statusCode")
    message: str
    error: str
    kind: str

    model_config = ConfigDict(populate_by_name=True)
