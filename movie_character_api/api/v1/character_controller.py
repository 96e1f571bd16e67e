"""
Character Controller
====================

FastAPI controller for character management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from movie_character_api.api.v1.dependencies import get_character_service, get_mapper
from movie_character_api.application.dto.character_dto import (
    CharacterCreateDTO,
    CharacterEditDTO,
    CharacterReadDTO,
)
from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.application.services.character_service import CharacterService
from movie_character_api.domain.exceptions import EntityNotFoundError, IdMismatchError, PersistenceError
from movie_character_api.domain.models.character import Character

router = APIRouter(tags=["character"])


@router.get("/", response_model=List[CharacterReadDTO], include_in_schema=False)
@router.get("", response_model=List[CharacterReadDTO], summary="List characters")
def get_all_characters(
    service: CharacterService = Depends(get_character_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[CharacterReadDTO]:
    """List all characters."""
    return mapper.map_list(service.list_characters(), CharacterReadDTO)


@router.get("/{character_id}", response_model=CharacterReadDTO, summary="Get character by ID")
def get_character_by_id(
    character_id: int,
    service: CharacterService = Depends(get_character_service),
    mapper: Mapper = Depends(get_mapper),
) -> CharacterReadDTO:
    """Get a specific character by ID."""
    character = service.get_character(character_id)

    if not character:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Character '{character_id}' not found"
        )

    return mapper.map(character, CharacterReadDTO)


@router.post(
    "/", response_model=CharacterReadDTO, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
@router.post(
    "",
    response_model=CharacterReadDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a character",
)
def create_character(
    request: Request,
    response: Response,
    character_dto: CharacterCreateDTO,
    service: CharacterService = Depends(get_character_service),
    mapper: Mapper = Depends(get_mapper),
) -> CharacterReadDTO:
    """Add a character."""
    try:
        character = service.create_character(mapper.map(character_dto, Character))
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.headers["Location"] = str(
        request.url_for("get_character_by_id", character_id=character.id)
    )
    return mapper.map(character, CharacterReadDTO)


@router.put(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a character",
)
def update_character(
    character_id: int,
    character_dto: CharacterEditDTO,
    service: CharacterService = Depends(get_character_service),
    mapper: Mapper = Depends(get_mapper),
) -> Response:
    """Update a character."""
    try:
        service.update_character(character_id, mapper.map(character_dto, Character))
    except IdMismatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a character",
)
def delete_character(
    character_id: int,
    service: CharacterService = Depends(get_character_service),
) -> Response:
    """Delete a character."""
    if not service.delete_character(character_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Character '{character_id}' not found"
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
