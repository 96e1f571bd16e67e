"""
Franchise Model
===============

Domain model representing a franchise grouping a set of movies.
"""
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_character_api.infrastructure.db.database import Base

if TYPE_CHECKING:
    from movie_character_api.domain.models.movie import Movie


class Franchise(Base):
    """
    Franchise domain model.

    A franchise owns its movies through ``movie.franchise_id``. Deleting a
    franchise detaches its movies instead of deleting them.
    """

    __tablename__ = "franchise"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    movies: Mapped[List["Movie"]] = relationship(
        "Movie", back_populates="franchise", order_by="Movie.id"
    )

    def __repr__(self) -> str:
        return f"<Franchise(id={self.id}, name={self.name})>"
