"""
SQLAlchemy Repository Base
==========================

Generic implementation of the CRUD repository contract on top of a
request-scoped SQLAlchemy Session.
"""
import logging
from typing import List, Optional, Sequence, Type

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.session import make_transient_to_detached

from movie_character_api.domain.repositories.base_repository import EntityType, Repository
from movie_character_api.infrastructure.db.database import INTEGER_MAX, INTEGER_MIN

logger = logging.getLogger(__name__)


def is_storable_id(entity_id: int) -> bool:
    """Check whether an id fits the INTEGER primary key column.

    Ids outside that range cannot match a row and are rejected by the
    driver, so lookups treat them as unknown without querying.
    """
    return INTEGER_MIN <= entity_id <= INTEGER_MAX


class SqlAlchemyRepository(Repository[EntityType]):
    """
    SQLAlchemy implementation of Repository.

    Subclasses set ``model`` to the mapped entity class. All repositories
    built for one request share the same Session, so ``save()`` on any of
    them commits the whole unit of work.
    """

    model: Type[EntityType]

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self._session = session

    def find_all(self) -> List[EntityType]:
        """Find all entities ordered by primary key."""
        return list(self._session.scalars(select(self.model).order_by(self.model.id)))

    def find_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Find an entity by its primary key."""
        if not is_storable_id(entity_id):
            return None
        return self._session.get(self.model, entity_id)

    def find_many(self, entity_ids: Sequence[int]) -> List[EntityType]:
        """Find several entities in one query."""
        storable = [entity_id for entity_id in entity_ids if is_storable_id(entity_id)]
        if not storable:
            return []
        stmt = select(self.model).where(self.model.id.in_(storable))
        return list(self._session.scalars(stmt))

    def exists(self, entity_id: int) -> bool:
        """Check if an entity exists."""
        if not is_storable_id(entity_id):
            return False
        found = self._session.scalar(
            select(self.model.id).where(self.model.id == entity_id).limit(1)
        )
        return found is not None

    def add(self, entity: EntityType) -> EntityType:
        """Stage a new entity."""
        self._session.add(entity)
        return entity

    def update(self, entity: EntityType) -> EntityType:
        """
        Attach a transient entity as if it had been loaded, then flag every
        populated scalar column as modified.

        The flush issues ``UPDATE ... WHERE id = ?``; a missing row surfaces
        as ``StaleDataError`` on save.
        """
        make_transient_to_detached(entity)
        self._session.add(entity)

        state = inspect(entity)
        for column_attr in state.mapper.column_attrs:
            key = column_attr.key
            if key in state.dict and not any(col.primary_key for col in column_attr.columns):
                flag_modified(entity, key)
        return entity

    def remove(self, entity: EntityType) -> None:
        """Stage an entity for deletion."""
        self._session.delete(entity)

    def save(self) -> None:
        """Commit the unit of work."""
        self._session.commit()

    def discard(self) -> None:
        """Roll back the unit of work."""
        logger.debug(f"Rolling back pending changes for {self.model.__name__}")
        self._session.rollback()
