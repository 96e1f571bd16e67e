"""
Dependency Providers
====================

FastAPI dependencies resolving request-scoped sessions and services from
the DI container.
"""
from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.application.services.character_service import CharacterService
from movie_character_api.application.services.franchise_service import FranchiseService
from movie_character_api.application.services.movie_service import MovieService
from movie_character_api.di.container import DIContainer, get_container
from movie_character_api.infrastructure.db.session import session_scope


def get_db_session(container: DIContainer = Depends(get_container)) -> Generator[Session, None, None]:
    """
    Open a database session for the current request.

    Yields:
        Session closed when the response has been sent
    """
    yield from session_scope(container.get("session_factory"))


def get_mapper(container: DIContainer = Depends(get_container)) -> Mapper:
    """
    Get the entity/DTO mapper (singleton).

    Returns:
        Mapper instance
    """
    return container.get(Mapper)


def get_franchise_service(
    session: Session = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> FranchiseService:
    """
    Get a franchise service bound to the request's session.

    Returns:
        FranchiseService instance
    """
    return container.get(FranchiseService, session=session)


def get_movie_service(
    session: Session = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> MovieService:
    """
    Get a movie service bound to the request's session.

    Returns:
        MovieService instance
    """
    return container.get(MovieService, session=session)


def get_character_service(
    session: Session = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CharacterService:
    """
    Get a character service bound to the request's session.

    Returns:
        CharacterService instance
    """
    return container.get(CharacterService, session=session)
