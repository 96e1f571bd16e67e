"""
SQLAlchemy Character Repository
===============================

Concrete implementation of CharacterRepository using SQLAlchemy.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from movie_character_api.domain.models.character import Character
from movie_character_api.domain.repositories.character_repository import CharacterRepository
from movie_character_api.infrastructure.db.sql_repository import SqlAlchemyRepository


class SqlCharacterRepository(SqlAlchemyRepository[Character], CharacterRepository):
    """SQLAlchemy implementation of CharacterRepository."""

    model = Character

    def find_all(self) -> List[Character]:
        """Find all characters with their movies eagerly loaded."""
        stmt = select(Character).options(selectinload(Character.movies)).order_by(Character.id)
        return list(self._session.scalars(stmt))
