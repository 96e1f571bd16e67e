"""
Franchise DTO
=============

Pydantic models for franchise API requests and responses.
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from movie_character_api.application.dto.base_dto import CamelModel
from movie_character_api.infrastructure.db.database import INTEGER_MAX, INTEGER_MIN


class FranchiseCreateDTO(CamelModel):
    """DTO for creating a franchise."""
    name: str = Field(..., max_length=50, description="Franchise name")
    description: Optional[str] = Field(None, max_length=50, description="Short description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Marvel Cinematic Universe",
                "description": "Superhero films produced by Marvel Studios",
            }
        }
    )


class FranchiseEditDTO(CamelModel):
    """DTO for replacing a franchise's fields. The id must match the path id."""
    id: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, description="Franchise ID")
    name: str = Field(..., max_length=50, description="Franchise name")
    description: Optional[str] = Field(None, max_length=50, description="Short description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Marvel Cinematic Universe",
                "description": "Superhero films produced by Marvel Studios",
            }
        }
    )


class FranchiseReadDTO(CamelModel):
    """DTO for franchise data. Movies are flattened into their ids."""
    id: int
    name: str = Field(..., max_length=50)
    description: Optional[str] = Field(None, max_length=50)
    movies: List[int] = Field(default_factory=list, description="IDs of the franchise's movies")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Marvel Cinematic Universe",
                "description": "Superhero films produced by Marvel Studios",
                "movies": [1, 2, 3],
            }
        }
    )
