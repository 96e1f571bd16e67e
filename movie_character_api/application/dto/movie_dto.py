"""
Movie DTO
=========

Pydantic models for movie API requests and responses.
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from movie_character_api.application.dto.base_dto import CamelModel
from movie_character_api.infrastructure.db.database import INTEGER_MAX, INTEGER_MIN


class MovieCreateDTO(CamelModel):
    """DTO for creating a movie."""
    title: str = Field(..., max_length=50, description="Movie title")
    genre: Optional[str] = Field(None, max_length=50, description="Comma separated genres")
    release_year: Optional[int] = Field(None, ge=INTEGER_MIN, le=INTEGER_MAX, description="Year of release")
    director: Optional[str] = Field(None, max_length=50, description="Director's name")
    picture: Optional[str] = Field(None, max_length=100, description="Poster URL")
    trailer: Optional[str] = Field(None, max_length=100, description="Trailer URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Iron Man",
                "genre": "Action, Sci-Fi",
                "releaseYear": 2008,
                "director": "Jon Favreau",
                "picture": "https://example.com/iron-man.jpg",
                "trailer": "https://www.youtube.com/watch?v=8ugaeA-nMTc",
            }
        }
    )


class MovieEditDTO(MovieCreateDTO):
    """DTO for replacing a movie's fields. The id must match the path id."""
    id: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, description="Movie ID")


class MovieReadDTO(CamelModel):
    """DTO for movie data. Relations are flattened into ids."""
    id: int
    title: str
    genre: Optional[str] = None
    release_year: Optional[int] = None
    director: Optional[str] = None
    picture: Optional[str] = None
    trailer: Optional[str] = None
    franchise: Optional[int] = Field(None, description="ID of the owning franchise")
    characters: List[int] = Field(default_factory=list, description="IDs of the movie's characters")
