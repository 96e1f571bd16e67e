"""
Assign Characters To Movie Use Case
===================================

Adds existing characters to a movie's cast.
"""
import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from movie_character_api.domain.exceptions import EntityNotFoundError, PersistenceError
from movie_character_api.domain.repositories.character_repository import CharacterRepository
from movie_character_api.domain.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class AssignCharactersToMovieUseCase:
    """Use case for assigning characters to a movie. Unknown ids are skipped."""

    def __init__(self, movie_repository: MovieRepository, character_repository: CharacterRepository):
        self._movie_repository = movie_repository
        self._character_repository = character_repository

    def execute(self, movie_id: int, character_ids: Sequence[int]) -> None:
        """
        Append the characters with the given ids to the movie.

        Raises:
            EntityNotFoundError: If the movie does not exist
            PersistenceError: If the commit fails
        """
        movie = self._movie_repository.find_with_characters(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)

        found = {c.id: c for c in self._character_repository.find_many(character_ids)}
        for character_id in character_ids:
            character = found.get(character_id)
            if character is None:
                logger.warning(f"Skipping unknown character {character_id} for movie {movie_id}")
                continue
            if character not in movie.characters:
                movie.characters.append(character)

        try:
            self._movie_repository.save()
        except SQLAlchemyError as e:
            self._movie_repository.discard()
            logger.error(f"Failed to assign characters to movie {movie_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to assign characters to movie '{movie_id}'") from e
