"""
Delete Entity Use Case
======================

Removes an entity by id.
"""
import logging
from typing import Generic

from movie_character_api.domain.repositories.base_repository import EntityType, Repository

logger = logging.getLogger(__name__)


class DeleteEntityUseCase(Generic[EntityType]):
    """Use case for deleting an entity."""

    def __init__(self, repository: Repository[EntityType], entity_name: str):
        self._repository = repository
        self._entity_name = entity_name

    def execute(self, entity_id: int) -> bool:
        """
        Delete the entity with key ``entity_id``.

        Returns:
            True if the entity was found and deleted, False otherwise
        """
        entity = self._repository.find_by_id(entity_id)
        if entity is None:
            return False

        self._repository.remove(entity)
        self._repository.save()
        logger.info(f"{self._entity_name} {entity_id} deleted")
        return True
