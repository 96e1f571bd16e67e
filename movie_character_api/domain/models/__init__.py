"""
Domain Models
=============

SQLAlchemy entities for franchises, movies and characters.
"""
from .franchise import Franchise
from .movie import Movie, character_movie
from .character import Character

__all__ = ["Franchise", "Movie", "Character", "character_movie"]
