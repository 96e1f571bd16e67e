"""
Franchise Repository Interface
==============================

Abstract interface for franchise data access.
"""
from abc import abstractmethod
from typing import Optional

from movie_character_api.domain.models.franchise import Franchise
from movie_character_api.domain.repositories.base_repository import Repository


class FranchiseRepository(Repository[Franchise]):
    """Abstract repository for franchise persistence operations."""

    @abstractmethod
    def find_with_movies(self, franchise_id: int) -> Optional[Franchise]:
        """
        Find a franchise with its movies eagerly loaded.

        Args:
            franchise_id: Franchise primary key

        Returns:
            Franchise entity if found, None otherwise
        """
        pass
