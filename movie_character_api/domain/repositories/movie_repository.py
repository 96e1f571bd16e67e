"""
Movie Repository Interface
==========================

Abstract interface for movie data access.
"""
from abc import abstractmethod
from typing import List, Optional, Sequence

from movie_character_api.domain.models.movie import Movie
from movie_character_api.domain.repositories.base_repository import Repository


class MovieRepository(Repository[Movie]):
    """Abstract repository for movie persistence operations."""

    @abstractmethod
    def find_with_characters(self, movie_id: int) -> Optional[Movie]:
        """
        Find a movie with its characters eagerly loaded.

        Args:
            movie_id: Movie primary key

        Returns:
            Movie entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_many_with_characters(self, movie_ids: Sequence[int]) -> List[Movie]:
        """
        Find several movies in one query, characters eagerly loaded.

        Args:
            movie_ids: Movie primary keys

        Returns:
            Movies that exist, in no particular order
        """
        pass
