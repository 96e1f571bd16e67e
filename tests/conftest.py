"""
Global test configuration.

API tests run against an in-memory SQLite database owned by a fresh DI
container per test. Service tests use the in-memory repositories below.
"""
from typing import Callable, Dict, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError

from movie_character_api.di.container import DIContainer
from movie_character_api.domain.models import Character, Franchise, Movie
from movie_character_api.domain.repositories import (
    CharacterRepository,
    FranchiseRepository,
    MovieRepository,
)
from movie_character_api.infrastructure.db.database import create_schema
from movie_character_api.main import create_application


@pytest.fixture
def container():
    """DI container bound to a private in-memory database."""
    test_container = DIContainer(database_url="sqlite://")
    create_schema(test_container.get("engine"))
    yield test_container
    test_container.dispose()


@pytest.fixture
def client(container):
    """Test client serving the application from ``container``."""
    application = create_application(container)
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def db_session(container):
    """Session for inspecting the database after requests."""
    session = container.get("session_factory")()
    yield session
    session.close()


@pytest.fixture
def statements(container) -> List[str]:
    """SQL statements sent to the database while the test runs."""
    recorded: List[str] = []

    def record(conn, cursor, statement, parameters, context, executemany):
        recorded.append(statement)

    engine = container.get("engine")
    event.listen(engine, "before_cursor_execute", record)
    yield recorded
    event.remove(engine, "before_cursor_execute", record)


@pytest.fixture
def seed(container) -> Callable:
    """Persist entities and return them with their keys populated."""

    def _seed(*entities):
        session = container.get("session_factory")()
        try:
            session.add_all(entities)
            session.commit()
        finally:
            session.close()
        return entities

    return _seed


@pytest.fixture
def marvel(seed):
    """Franchise 'Marvel' with two movies sharing Iron Man."""
    iron_man = Character(full_name="Tony Stark", alias="Iron Man", gender="Male")
    cap = Character(full_name="Steve Rogers", alias="Captain America", gender="Male")
    first = Movie(title="Iron Man", genre="Action", release_year=2008, director="Jon Favreau")
    second = Movie(title="The Avengers", genre="Action", release_year=2012, director="Joss Whedon")
    first.characters = [iron_man]
    second.characters = [iron_man, cap]
    franchise = Franchise(name="Marvel", description="Marvel Cinematic Universe")
    franchise.movies = [first, second]
    seed(franchise)
    return {
        "franchise": franchise,
        "movies": [first, second],
        "characters": [iron_man, cap],
    }


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryRepository:
    """Dict-backed stand-in for the SQLAlchemy repositories."""

    def __init__(self, entities: Optional[List] = None):
        self.items: Dict[int, object] = {e.id: e for e in entities or []}
        self.pending: List = []
        self.saves = 0
        self.discards = 0
        self.save_error: Optional[Exception] = None

    def find_all(self):
        return [self.items[key] for key in sorted(self.items)]

    def find_by_id(self, entity_id):
        return self.items.get(entity_id)

    def find_many(self, entity_ids: Sequence[int]):
        return [self.items[i] for i in set(entity_ids) if i in self.items]

    def exists(self, entity_id):
        return entity_id in self.items

    def add(self, entity):
        self.pending.append(entity)
        return entity

    def update(self, entity):
        self.pending.append(entity)
        return entity

    def remove(self, entity):
        self.items.pop(entity.id, None)

    def save(self):
        if self.save_error is not None:
            raise self.save_error
        for entity in self.pending:
            if entity.id is None:
                entity.id = max(self.items, default=0) + 1
            self.items[entity.id] = entity
        self.pending.clear()
        self.saves += 1

    def discard(self):
        self.pending.clear()
        self.discards += 1


class InMemoryFranchiseRepository(InMemoryRepository, FranchiseRepository):
    def find_with_movies(self, franchise_id):
        return self.items.get(franchise_id)


class InMemoryMovieRepository(InMemoryRepository, MovieRepository):
    def find_with_characters(self, movie_id):
        return self.items.get(movie_id)

    def find_many_with_characters(self, movie_ids):
        return self.find_many(movie_ids)


class InMemoryCharacterRepository(InMemoryRepository, CharacterRepository):
    pass


@pytest.fixture
def failing_commit() -> SQLAlchemyError:
    return SQLAlchemyError("disk I/O error")


@pytest.fixture
def memory_repositories():
    """Factory building in-memory franchise, movie and character repositories."""

    def _build(franchises=(), movies=(), characters=()):
        return (
            InMemoryFranchiseRepository(list(franchises)),
            InMemoryMovieRepository(list(movies)),
            InMemoryCharacterRepository(list(characters)),
        )

    return _build
