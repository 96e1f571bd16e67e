"""
Franchise Service
=================

Application service that coordinates franchise-related operations.
This service orchestrates multiple use cases.
"""
from typing import List, Optional, Sequence

from movie_character_api.application.use_cases.common import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    UpdateEntityUseCase,
)
from movie_character_api.application.use_cases.franchise.assign_movies_to_franchise import (
    AssignMoviesToFranchiseUseCase,
)
from movie_character_api.application.use_cases.franchise.get_characters_by_franchise import (
    GetCharactersByFranchiseUseCase,
)
from movie_character_api.domain.exceptions import EntityNotFoundError
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.models.franchise import Franchise
from movie_character_api.domain.models.movie import Movie
from movie_character_api.domain.repositories.franchise_repository import FranchiseRepository
from movie_character_api.domain.repositories.movie_repository import MovieRepository


class FranchiseService:
    """
    Application service for franchise operations.

    This service coordinates multiple use cases and provides
    a high-level interface for franchise management.
    """

    def __init__(self, franchise_repository: FranchiseRepository, movie_repository: MovieRepository):
        """
        Initialize service with repositories.

        Args:
            franchise_repository: Repository for franchise persistence
            movie_repository: Repository for movie persistence
        """
        self._repository = franchise_repository
        self._movie_repository = movie_repository
        self._create_use_case = CreateEntityUseCase(franchise_repository, "Franchise")
        self._update_use_case = UpdateEntityUseCase(franchise_repository, "Franchise")
        self._delete_use_case = DeleteEntityUseCase(franchise_repository, "Franchise")
        self._characters_use_case = GetCharactersByFranchiseUseCase(franchise_repository, movie_repository)
        self._assign_movies_use_case = AssignMoviesToFranchiseUseCase(franchise_repository, movie_repository)

    def list_franchises(self) -> List[Franchise]:
        """
        List all franchises.

        Returns:
            List of franchise entities, empty if none are stored
        """
        return self._repository.find_all()

    def get_franchise(self, franchise_id: int) -> Optional[Franchise]:
        """
        Get a franchise by ID.

        Args:
            franchise_id: Franchise identifier

        Returns:
            Franchise entity if found, None otherwise
        """
        return self._repository.find_by_id(franchise_id)

    def create_franchise(self, franchise: Franchise) -> Franchise:
        """
        Store a new franchise.

        Args:
            franchise: Transient franchise mapped from a create DTO

        Returns:
            Stored franchise entity
        """
        return self._create_use_case.execute(franchise)

    def update_franchise(self, franchise_id: int, franchise: Franchise) -> None:
        """
        Replace the name and description of a franchise.

        Args:
            franchise_id: Identifier from the request path
            franchise: Transient franchise mapped from an edit DTO
        """
        self._update_use_case.execute(franchise_id, franchise)

    def delete_franchise(self, franchise_id: int) -> bool:
        """
        Delete a franchise. Its movies are kept and detached.

        Args:
            franchise_id: Franchise identifier

        Returns:
            True if franchise was found and deleted, False otherwise
        """
        return self._delete_use_case.execute(franchise_id)

    def get_movies(self, franchise_id: int) -> List[Movie]:
        """
        Get the movies of a franchise.

        Raises:
            EntityNotFoundError: If the franchise does not exist
        """
        franchise = self._repository.find_with_movies(franchise_id)
        if franchise is None:
            raise EntityNotFoundError("Franchise", franchise_id)
        movie_ids = [movie.id for movie in franchise.movies]
        loaded = {
            movie.id: movie
            for movie in self._movie_repository.find_many_with_characters(movie_ids)
        }
        return [loaded[movie_id] for movie_id in movie_ids if movie_id in loaded]

    def get_characters(self, franchise_id: int) -> List[Character]:
        """Get the characters of a franchise, one entry per movie appearance."""
        return self._characters_use_case.execute(franchise_id)

    def assign_movies(self, franchise_id: int, movie_ids: Sequence[int]) -> None:
        """Assign existing movies to a franchise, skipping unknown ids."""
        self._assign_movies_use_case.execute(franchise_id, movie_ids)
