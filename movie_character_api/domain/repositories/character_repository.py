"""
Character Repository Interface
==============================

Abstract interface for character data access.
"""
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.repositories.base_repository import Repository


class CharacterRepository(Repository[Character]):
    """Abstract repository for character persistence operations."""
