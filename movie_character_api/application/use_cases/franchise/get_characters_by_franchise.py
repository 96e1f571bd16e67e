"""
Get Characters By Franchise Use Case
====================================

Collects every character appearing in a franchise's movies.
"""
import logging
from typing import List

from movie_character_api.domain.exceptions import EntityNotFoundError, InconsistentAssociationError
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.repositories.franchise_repository import FranchiseRepository
from movie_character_api.domain.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class GetCharactersByFranchiseUseCase:
    """
    Use case for listing the characters of a franchise.

    The franchise's movies are fetched together with their characters in
    a single batched query. The result is flat and keeps duplicates: a
    character appearing in two movies of the franchise is listed twice.
    """

    def __init__(self, franchise_repository: FranchiseRepository, movie_repository: MovieRepository):
        self._franchise_repository = franchise_repository
        self._movie_repository = movie_repository

    def execute(self, franchise_id: int) -> List[Character]:
        """
        Get the characters of a franchise in movie order.

        Args:
            franchise_id: Franchise identifier

        Returns:
            Characters of every movie, duplicates included

        Raises:
            EntityNotFoundError: If the franchise does not exist
            InconsistentAssociationError: If one of the franchise's movies
                can no longer be found
        """
        franchise = self._franchise_repository.find_with_movies(franchise_id)
        if franchise is None:
            raise EntityNotFoundError("Franchise", franchise_id)

        movie_ids = [movie.id for movie in franchise.movies]
        movies_by_id = {
            movie.id: movie
            for movie in self._movie_repository.find_many_with_characters(movie_ids)
        }

        characters: List[Character] = []
        for movie_id in movie_ids:
            movie = movies_by_id.get(movie_id)
            if movie is None:
                logger.error(f"Movie {movie_id} of franchise {franchise_id} could not be loaded")
                raise InconsistentAssociationError(
                    f"Movie '{movie_id}' of franchise '{franchise_id}' could not be loaded"
                )
            characters.extend(movie.characters)

        return characters
