"""
Create Entity Use Case
======================

Inserts a new entity and commits it.
"""
import logging
from typing import Generic

from sqlalchemy.exc import SQLAlchemyError

from movie_character_api.domain.exceptions import PersistenceError
from movie_character_api.domain.repositories.base_repository import EntityType, Repository

logger = logging.getLogger(__name__)


class CreateEntityUseCase(Generic[EntityType]):
    """Use case for inserting an entity."""

    def __init__(self, repository: Repository[EntityType], entity_name: str):
        self._repository = repository
        self._entity_name = entity_name

    def execute(self, entity: EntityType) -> EntityType:
        """
        Insert ``entity`` and commit.

        Args:
            entity: Transient entity mapped from a create DTO

        Returns:
            The stored entity, primary key populated

        Raises:
            PersistenceError: If the commit fails for any reason
        """
        self._repository.add(entity)
        try:
            self._repository.save()
        except SQLAlchemyError as e:
            self._repository.discard()
            logger.error(f"Failed to create {self._entity_name}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to create {self._entity_name}") from e

        logger.info(f"{self._entity_name} {entity.id} created")
        return entity
