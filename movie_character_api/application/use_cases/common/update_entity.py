"""
Update Entity Use Case
======================

Replaces every scalar field of a stored entity.
"""
import logging
from typing import Generic

from sqlalchemy.orm.exc import StaleDataError

from movie_character_api.domain.exceptions import EntityNotFoundError, IdMismatchError
from movie_character_api.domain.repositories.base_repository import EntityType, Repository

logger = logging.getLogger(__name__)


class UpdateEntityUseCase(Generic[EntityType]):
    """
    Use case for full-replace updates.

    Relations are never touched here; they change only through the
    dedicated assignment use cases.
    """

    def __init__(self, repository: Repository[EntityType], entity_name: str):
        self._repository = repository
        self._entity_name = entity_name

    def execute(self, entity_id: int, entity: EntityType) -> None:
        """
        Write ``entity`` over the stored row with key ``entity_id``.

        Args:
            entity_id: Identifier taken from the request path
            entity: Transient entity mapped from an edit DTO

        Raises:
            IdMismatchError: If ``entity.id`` differs from ``entity_id``
            EntityNotFoundError: If the update matched no row and the row
                does not exist
            StaleDataError: If the update matched no row although the row
                still exists
        """
        if entity.id != entity_id:
            raise IdMismatchError(entity_id, entity.id)

        self._repository.update(entity)
        try:
            self._repository.save()
        except StaleDataError:
            self._repository.discard()
            if not self._repository.exists(entity_id):
                logger.warning(f"{self._entity_name} {entity_id} vanished before update")
                raise EntityNotFoundError(self._entity_name, entity_id)
            logger.error(f"Concurrency conflict while updating {self._entity_name} {entity_id}")
            raise

        logger.info(f"{self._entity_name} {entity_id} updated")
