"""
Character Model
===============

Domain model representing a character appearing in movies.
"""
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_character_api.domain.models.movie import character_movie
from movie_character_api.infrastructure.db.database import Base

if TYPE_CHECKING:
    from movie_character_api.domain.models.movie import Movie


class Character(Base):
    """Character domain model. Appears in zero or more movies."""

    __tablename__ = "character"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    alias: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    picture: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    movies: Mapped[List["Movie"]] = relationship(
        "Movie", secondary=character_movie, back_populates="characters", order_by="Movie.id"
    )

    def __repr__(self) -> str:
        return f"<Character(id={self.id}, full_name={self.full_name})>"
