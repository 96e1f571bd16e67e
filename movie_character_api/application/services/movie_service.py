"""
Movie Service
=============

Application service for movie-related operations.
"""
from typing import List, Optional, Sequence

from movie_character_api.application.use_cases.common import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    UpdateEntityUseCase,
)
from movie_character_api.application.use_cases.movie.assign_characters_to_movie import (
    AssignCharactersToMovieUseCase,
)
from movie_character_api.domain.exceptions import EntityNotFoundError
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.models.movie import Movie
from movie_character_api.domain.repositories.character_repository import CharacterRepository
from movie_character_api.domain.repositories.movie_repository import MovieRepository


class MovieService:
    """Application service for movie operations."""

    def __init__(self, movie_repository: MovieRepository, character_repository: CharacterRepository):
        self._repository = movie_repository
        self._create_use_case = CreateEntityUseCase(movie_repository, "Movie")
        self._update_use_case = UpdateEntityUseCase(movie_repository, "Movie")
        self._delete_use_case = DeleteEntityUseCase(movie_repository, "Movie")
        self._assign_characters_use_case = AssignCharactersToMovieUseCase(
            movie_repository, character_repository
        )

    def list_movies(self) -> List[Movie]:
        """List all movies."""
        return self._repository.find_all()

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """Get a movie by ID, None if missing."""
        return self._repository.find_by_id(movie_id)

    def create_movie(self, movie: Movie) -> Movie:
        return self._create_use_case.execute(movie)

    def update_movie(self, movie_id: int, movie: Movie) -> None:
        self._update_use_case.execute(movie_id, movie)

    def delete_movie(self, movie_id: int) -> bool:
        return self._delete_use_case.execute(movie_id)

    def get_characters(self, movie_id: int) -> List[Character]:
        """
        Get the characters of a movie.

        Raises:
            EntityNotFoundError: If the movie does not exist
        """
        movie = self._repository.find_with_characters(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return list(movie.characters)

    def assign_characters(self, movie_id: int, character_ids: Sequence[int]) -> None:
        """Assign existing characters to a movie, skipping unknown ids."""
        self._assign_characters_use_case.execute(movie_id, character_ids)
