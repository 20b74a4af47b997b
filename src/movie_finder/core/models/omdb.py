"""OMDb API response models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OMDbMovie(BaseModel):
    """Single entry of an OMDb search response."""

    title: str = Field(..., alias="Title")
    imdb_id: str = Field(..., alias="imdbID")
    year: Optional[str] = Field(None, alias="Year")
    poster: Optional[str] = Field(None, alias="Poster")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OMDbSearchResponse(BaseModel):
    """OMDb search response, normalized so that "no results" is just empty."""

    search: List[OMDbMovie] = Field(default_factory=list, alias="Search")
    total_results: str = Field(default="0", alias="totalResults")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def is_empty(self) -> bool:
        """Whether the response carries no movies."""
        return not self.search

    @classmethod
    def empty(cls) -> "OMDbSearchResponse":
        """Create an empty result."""
        return cls(search=[], total_results="0")
