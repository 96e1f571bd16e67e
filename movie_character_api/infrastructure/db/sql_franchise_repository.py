"""
SQLAlchemy Franchise Repository
===============================

Concrete implementation of FranchiseRepository using SQLAlchemy.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from movie_character_api.domain.models.franchise import Franchise
from movie_character_api.domain.repositories.franchise_repository import FranchiseRepository
from movie_character_api.infrastructure.db.sql_repository import SqlAlchemyRepository, is_storable_id


class SqlFranchiseRepository(SqlAlchemyRepository[Franchise], FranchiseRepository):
    """SQLAlchemy implementation of FranchiseRepository."""

    model = Franchise

    def find_all(self) -> List[Franchise]:
        """Find all franchises with their movies eagerly loaded."""
        stmt = select(Franchise).options(selectinload(Franchise.movies)).order_by(Franchise.id)
        return list(self._session.scalars(stmt))

    def find_with_movies(self, franchise_id: int) -> Optional[Franchise]:
        """Find a franchise with its movies eagerly loaded."""
        if not is_storable_id(franchise_id):
            return None
        stmt = (
            select(Franchise)
            .options(selectinload(Franchise.movies))
            .where(Franchise.id == franchise_id)
        )
        return self._session.scalars(stmt).first()
