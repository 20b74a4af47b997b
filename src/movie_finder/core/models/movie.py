"""Movie-related data models."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.text_utils import has_poster, parse_year, same_imdb_id


class Movie(BaseModel):
    """Movie record as stored in favorites."""

    title: str = Field(..., description="Movie title")
    imdb_id: str = Field(..., alias="imdbID", description="IMDb ID")
    year: int = Field(..., description="Release year, 0 if unknown")
    poster: Optional[str] = Field(None, description="Poster image URL")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def has_poster(self) -> bool:
        """Whether the poster points at an actual image."""
        return has_poster(self.poster)

    def matches(self, imdb_id: str) -> bool:
        """Check whether this movie has the given IMDb ID, ignoring case."""
        return same_imdb_id(self.imdb_id, imdb_id)

    def to_record(self) -> dict:
        """Serialize with wire/disk field names."""
        return self.model_dump(by_alias=True)


class FavoriteRecord(BaseModel):
    """Entry of the favorites file.

    Values are coerced, never rejected: any entry that has all four keys
    loads, with a bad year read as 0 and a non-text poster as None.
    """

    title: str = Field(..., description="Movie title")
    imdb_id: str = Field(..., alias="imdbID", description="IMDb ID")
    year: int = Field(default=0, description="Release year, 0 if unknown")
    poster: Optional[str] = Field(None, description="Poster image URL")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", "imdb_id", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v: Any) -> int:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return parse_year(v if isinstance(v, str) else None)

    @field_validator("poster", mode="before")
    @classmethod
    def coerce_poster(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    def to_movie(self) -> Movie:
        return Movie(title=self.title, imdb_id=self.imdb_id, year=self.year, poster=self.poster)


class SearchResultMovie(Movie):
    """Movie returned by a search, annotated with favorite status."""

    is_favorite: bool = Field(default=False, alias="isFavorite", description="In favorites")


class SearchPage(BaseModel):
    """One page of search results."""

    movies: List[SearchResultMovie] = Field(default_factory=list)
    count: int = Field(default=0, ge=0, description="Movies on this page")
    total_results: str = Field(
        default="0", alias="totalResults", description="Upstream total, verbatim"
    )

    model_config = ConfigDict(populate_by_name=True)


class FavoritesPage(BaseModel):
    """One page of the favorites list."""

    favorites: List[Movie] = Field(default_factory=list)
    count: int = Field(default=0, ge=0, description="Favorites on this page")
    total_results: str = Field(default="0", alias="totalResults", description="Total favorites")
    current_page: int = Field(default=1, ge=1, alias="currentPage")
    total_pages: int = Field(default=1, ge=1, alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)
