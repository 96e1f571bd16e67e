"""
Movie Model
===========

Domain model representing a movie and its cast.
"""
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_character_api.infrastructure.db.database import Base

if TYPE_CHECKING:
    from movie_character_api.domain.models.character import Character
    from movie_character_api.domain.models.franchise import Franchise


# Junction table for characters and movies (many-to-many relationship)
character_movie = Table(
    "character_movie",
    Base.metadata,
    Column("character_id", Integer, ForeignKey("character.id", ondelete="CASCADE"), primary_key=True),
    Column("movie_id", Integer, ForeignKey("movie.id", ondelete="CASCADE"), primary_key=True),
)


class Movie(Base):
    """Movie domain model. Belongs to zero or one franchise."""

    __tablename__ = "movie"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    genre: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    release_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    director: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    picture: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    trailer: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    franchise_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("franchise.id", ondelete="SET NULL"), nullable=True
    )

    franchise: Mapped[Optional["Franchise"]] = relationship("Franchise", back_populates="movies")
    characters: Mapped[List["Character"]] = relationship(
        "Character", secondary=character_movie, back_populates="movies", order_by="Character.id"
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title}, release_year={self.release_year})>"
