"""
SQLAlchemy Movie Repository
===========================

Concrete implementation of MovieRepository using SQLAlchemy.
"""
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from movie_character_api.domain.models.character import Character
from movie_character_api.domain.models.movie import Movie
from movie_character_api.domain.repositories.movie_repository import MovieRepository
from movie_character_api.infrastructure.db.sql_repository import SqlAlchemyRepository, is_storable_id


class SqlMovieRepository(SqlAlchemyRepository[Movie], MovieRepository):
    """SQLAlchemy implementation of MovieRepository."""

    model = Movie

    def find_all(self) -> List[Movie]:
        """Find all movies with their characters eagerly loaded."""
        stmt = (
            select(Movie)
            .options(selectinload(Movie.characters).selectinload(Character.movies))
            .order_by(Movie.id)
        )
        return list(self._session.scalars(stmt))

    def find_with_characters(self, movie_id: int) -> Optional[Movie]:
        """Find a movie with its characters eagerly loaded."""
        if not is_storable_id(movie_id):
            return None
        stmt = (
            select(Movie)
            .options(selectinload(Movie.characters).selectinload(Character.movies))
            .where(Movie.id == movie_id)
        )
        return self._session.scalars(stmt).first()

    def find_many_with_characters(self, movie_ids: Sequence[int]) -> List[Movie]:
        """Find several movies in one query, characters eagerly loaded."""
        storable = [movie_id for movie_id in movie_ids if is_storable_id(movie_id)]
        if not storable:
            return []
        stmt = (
            select(Movie)
            .options(selectinload(Movie.characters).selectinload(Character.movies))
            .where(Movie.id.in_(storable))
        )
        return list(self._session.scalars(stmt))
