"""
Movie Controller
================

FastAPI controller for movie management endpoints.
"""
from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from movie_character_api.api.v1.dependencies import get_mapper, get_movie_service
from movie_character_api.application.dto.character_dto import CharacterReadDTO
from movie_character_api.application.dto.movie_dto import MovieCreateDTO, MovieEditDTO, MovieReadDTO
from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.application.services.movie_service import MovieService
from movie_character_api.domain.exceptions import EntityNotFoundError, IdMismatchError, PersistenceError
from movie_character_api.domain.models.movie import Movie

router = APIRouter(tags=["movie"])


@router.get("/", response_model=List[MovieReadDTO], include_in_schema=False)
@router.get("", response_model=List[MovieReadDTO], summary="List movies")
def get_all_movies(
    service: MovieService = Depends(get_movie_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[MovieReadDTO]:
    """List all movies."""
    return mapper.map_list(service.list_movies(), MovieReadDTO)


@router.get("/{movie_id}", response_model=MovieReadDTO, summary="Get movie by ID")
def get_movie_by_id(
    movie_id: int,
    service: MovieService = Depends(get_movie_service),
    mapper: Mapper = Depends(get_mapper),
) -> MovieReadDTO:
    """Get a specific movie by ID."""
    movie = service.get_movie(movie_id)

    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie '{movie_id}' not found"
        )

    return mapper.map(movie, MovieReadDTO)


@router.post(
    "/", response_model=MovieReadDTO, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
@router.post(
    "",
    response_model=MovieReadDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a movie",
)
def create_movie(
    request: Request,
    response: Response,
    movie_dto: MovieCreateDTO,
    service: MovieService = Depends(get_movie_service),
    mapper: Mapper = Depends(get_mapper),
) -> MovieReadDTO:
    """Add a movie."""
    try:
        movie = service.create_movie(mapper.map(movie_dto, Movie))
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.headers["Location"] = str(request.url_for("get_movie_by_id", movie_id=movie.id))
    return mapper.map(movie, MovieReadDTO)


@router.put(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a movie",
    description="Replace a movie's fields. Franchise and characters are left unchanged."
)
def update_movie(
    movie_id: int,
    movie_dto: MovieEditDTO,
    service: MovieService = Depends(get_movie_service),
    mapper: Mapper = Depends(get_mapper),
) -> Response:
    """Update a movie."""
    try:
        service.update_movie(movie_id, mapper.map(movie_dto, Movie))
    except IdMismatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a movie",
)
def delete_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Delete a movie."""
    if not service.delete_movie(movie_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie '{movie_id}' not found"
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/charactersByMovie/{movie_id}",
    response_model=List[CharacterReadDTO],
    summary="List characters of a movie",
)
def get_characters_by_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[CharacterReadDTO]:
    """Get all characters in a movie."""
    try:
        characters = service.get_characters(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return mapper.map_list(characters, CharacterReadDTO)


@router.post(
    "/character/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Assign characters to a movie",
    description="Add characters to a movie by id. Ids that match no character are ignored."
)
def assign_characters_to_movie(
    movie_id: int,
    character_ids: List[int] = Body(..., examples=[[1, 2]]),
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Assign characters to a movie."""
    try:
        service.assign_characters(movie_id, character_ids)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
