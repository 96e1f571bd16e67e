"""
Franchise Controller
====================

FastAPI controller for franchise management endpoints.
"""
from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from movie_character_api.api.v1.dependencies import get_franchise_service, get_mapper
from movie_character_api.application.dto.character_dto import CharacterReadDTO
from movie_character_api.application.dto.franchise_dto import (
    FranchiseCreateDTO,
    FranchiseEditDTO,
    FranchiseReadDTO,
)
from movie_character_api.application.dto.movie_dto import MovieReadDTO
from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.application.services.franchise_service import FranchiseService
from movie_character_api.domain.exceptions import (
    EntityNotFoundError,
    IdMismatchError,
    InconsistentAssociationError,
    PersistenceError,
)
from movie_character_api.domain.models.franchise import Franchise

router = APIRouter(tags=["franchise"])


@router.get("/", response_model=List[FranchiseReadDTO], include_in_schema=False)
@router.get(
    "",
    response_model=List[FranchiseReadDTO],
    summary="List franchises",
    description="Get all franchises in the database."
)
def get_all_franchises(
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[FranchiseReadDTO]:
    """List all franchises."""
    return mapper.map_list(service.list_franchises(), FranchiseReadDTO)


@router.get(
    "/{franchise_id}",
    response_model=FranchiseReadDTO,
    summary="Get franchise by ID",
    description="Get details of a specific franchise."
)
def get_franchise_by_id(
    franchise_id: int,
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> FranchiseReadDTO:
    """Get a specific franchise by ID."""
    franchise = service.get_franchise(franchise_id)

    if not franchise:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Franchise '{franchise_id}' not found"
        )

    return mapper.map(franchise, FranchiseReadDTO)


@router.post(
    "/", response_model=FranchiseReadDTO, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
@router.post(
    "",
    response_model=FranchiseReadDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a franchise",
    description="Add a franchise to the database. The Location header points at the new resource."
)
def create_franchise(
    request: Request,
    response: Response,
    franchise_dto: FranchiseCreateDTO,
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> FranchiseReadDTO:
    """Add a franchise."""
    try:
        franchise = service.create_franchise(mapper.map(franchise_dto, Franchise))
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.headers["Location"] = str(
        request.url_for("get_franchise_by_id", franchise_id=franchise.id)
    )
    return mapper.map(franchise, FranchiseReadDTO)


@router.put(
    "/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a franchise",
    description="Replace a franchise's name and description. The body id must match the path id."
)
def update_franchise(
    franchise_id: int,
    franchise_dto: FranchiseEditDTO,
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> Response:
    """Update a franchise."""
    try:
        service.update_franchise(franchise_id, mapper.map(franchise_dto, Franchise))
    except IdMismatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a franchise",
    description="Delete a franchise. Its movies are kept and no longer belong to any franchise."
)
def delete_franchise(
    franchise_id: int,
    service: FranchiseService = Depends(get_franchise_service),
) -> Response:
    """Delete a franchise."""
    if not service.delete_franchise(franchise_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Franchise '{franchise_id}' not found"
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/moviesByFranchise/{franchise_id}",
    response_model=List[MovieReadDTO],
    summary="List movies of a franchise",
)
def get_movies_by_franchise(
    franchise_id: int,
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[MovieReadDTO]:
    """Get all movies in a franchise."""
    try:
        movies = service.get_movies(franchise_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return mapper.map_list(movies, MovieReadDTO)


@router.get(
    "/charactersByFranchise/{franchise_id}",
    response_model=List[CharacterReadDTO],
    summary="List characters of a franchise",
    description="""
    Get every character appearing in the franchise's movies.

    A character appearing in several movies of the franchise is listed
    once per movie.
    """
)
def get_characters_by_franchise(
    franchise_id: int,
    service: FranchiseService = Depends(get_franchise_service),
    mapper: Mapper = Depends(get_mapper),
) -> List[CharacterReadDTO]:
    """Get all characters in a franchise."""
    try:
        characters = service.get_characters(franchise_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InconsistentAssociationError as e:
        # A server-side inconsistency, reported as a client error
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return mapper.map_list(characters, CharacterReadDTO)


@router.post(
    "/movie/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Assign movies to a franchise",
    description="Add movies to a franchise by id. Ids that match no movie are ignored."
)
def assign_movies_to_franchise(
    franchise_id: int,
    movie_ids: List[int] = Body(..., examples=[[1, 2, 3]]),
    service: FranchiseService = Depends(get_franchise_service),
) -> Response:
    """Assign movies to a franchise."""
    try:
        service.assign_movies(franchise_id, movie_ids)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
