"""
Base Repository Interface
=========================

Abstract CRUD contract shared by every entity repository.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

EntityType = TypeVar("EntityType")


class Repository(ABC, Generic[EntityType]):
    """
    Abstract repository for entity persistence operations.

    Mutations (add, update, remove) are staged in the current unit of work
    and only reach the database on ``save()``.
    """

    @abstractmethod
    def find_all(self) -> List[EntityType]:
        """
        Find all entities.

        Returns:
            List of entities, empty if none are stored
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[EntityType]:
        """
        Find an entity by its primary key.

        Args:
            entity_id: Primary key

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_many(self, entity_ids: Sequence[int]) -> List[EntityType]:
        """
        Find several entities in one query.

        Args:
            entity_ids: Primary keys, unknown ones are ignored

        Returns:
            Entities that exist, in no particular order
        """
        pass

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """
        Check if an entity exists.

        Args:
            entity_id: Primary key

        Returns:
            True if entity exists, False otherwise
        """
        pass

    @abstractmethod
    def add(self, entity: EntityType) -> EntityType:
        """
        Stage a new entity for insertion.

        Args:
            entity: Entity to insert

        Returns:
            The staged entity
        """
        pass

    @abstractmethod
    def update(self, entity: EntityType) -> EntityType:
        """
        Stage a detached entity as fully modified.

        Every scalar column is written on save. When no stored row matches
        the entity's key, ``save()`` raises a concurrency conflict.

        Args:
            entity: Entity carrying the new values and an existing key

        Returns:
            The attached entity
        """
        pass

    @abstractmethod
    def remove(self, entity: EntityType) -> None:
        """
        Stage an entity for deletion.

        Args:
            entity: Entity previously loaded through this repository
        """
        pass

    @abstractmethod
    def save(self) -> None:
        """Commit the unit of work or raise on failure."""
        pass

    @abstractmethod
    def discard(self) -> None:
        """Roll back everything staged since the last save."""
        pass
