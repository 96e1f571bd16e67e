"""
Assign Movies To Franchise Use Case
===================================

Adds existing movies to a franchise.
"""
import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from movie_character_api.domain.exceptions import EntityNotFoundError, PersistenceError
from movie_character_api.domain.repositories.franchise_repository import FranchiseRepository
from movie_character_api.domain.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class AssignMoviesToFranchiseUseCase:
    """
    Use case for assigning movies to a franchise.

    Ids that do not resolve to a movie are skipped without error. A movie
    that belonged to another franchise moves to this one. Everything is
    committed once, after all appends.
    """

    def __init__(self, franchise_repository: FranchiseRepository, movie_repository: MovieRepository):
        self._franchise_repository = franchise_repository
        self._movie_repository = movie_repository

    def execute(self, franchise_id: int, movie_ids: Sequence[int]) -> None:
        """
        Append the movies with the given ids to the franchise.

        Raises:
            EntityNotFoundError: If the franchise does not exist
            PersistenceError: If the commit fails
        """
        franchise = self._franchise_repository.find_with_movies(franchise_id)
        if franchise is None:
            raise EntityNotFoundError("Franchise", franchise_id)

        found = {movie.id: movie for movie in self._movie_repository.find_many(movie_ids)}
        for movie_id in movie_ids:
            movie = found.get(movie_id)
            if movie is None:
                logger.warning(f"Skipping unknown movie {movie_id} for franchise {franchise_id}")
                continue
            if movie not in franchise.movies:
                franchise.movies.append(movie)

        try:
            self._franchise_repository.save()
        except SQLAlchemyError as e:
            self._franchise_repository.discard()
            logger.error(f"Failed to assign movies to franchise {franchise_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to assign movies to franchise '{franchise_id}'") from e

        logger.info(f"Franchise {franchise_id} now has {len(franchise.movies)} movies")
