"""
Character DTO
=============

Pydantic models for character API requests and responses.
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from movie_character_api.application.dto.base_dto import CamelModel
from movie_character_api.infrastructure.db.database import INTEGER_MAX, INTEGER_MIN


class CharacterCreateDTO(CamelModel):
    """DTO for creating a character."""
    full_name: str = Field(..., max_length=50, description="Character's full name")
    alias: Optional[str] = Field(None, max_length=50, description="Alias or nickname")
    gender: Optional[str] = Field(None, max_length=50)
    picture: Optional[str] = Field(None, max_length=100, description="Picture URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fullName": "Tony Stark",
                "alias": "Iron Man",
                "gender": "Male",
                "picture": "https://example.com/tony-stark.jpg",
            }
        }
    )


class CharacterEditDTO(CharacterCreateDTO):
    """DTO for replacing a character's fields. The id must match the path id."""
    id: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, description="Character ID")


class CharacterReadDTO(CamelModel):
    """DTO for character data. Movies are flattened into their ids."""
    id: int
    full_name: str
    alias: Optional[str] = None
    gender: Optional[str] = None
    picture: Optional[str] = None
    movies: List[int] = Field(default_factory=list, description="IDs of the movies the character appears in")
