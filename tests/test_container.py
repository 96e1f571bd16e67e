"""
Tests for the dependency injection container.
"""
import pytest
from sqlalchemy.orm import Session

from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.application.services.franchise_service import FranchiseService
from movie_character_api.di.base_container import BaseContainer
from movie_character_api.domain.repositories import FranchiseRepository
from movie_character_api.infrastructure.db.sql_franchise_repository import SqlFranchiseRepository


def test_unknown_registration_raises():
    with pytest.raises(ValueError):
        BaseContainer().get("missing")


def test_factory_receives_keyword_arguments():
    container = BaseContainer()
    container.register_factory(dict, lambda **kwargs: dict(kwargs))

    assert container.get(dict, session="s") == {"session": "s"}
    assert container.get(dict, session="s") is not container.get(dict, session="s")


def test_singleton_wins_over_factory():
    container = BaseContainer()
    marker = object()
    container.register_factory(object, lambda: object())
    container.register_singleton(object, marker)

    assert container.get(object) is marker


def test_mapper_is_process_wide(container):
    assert container.get(Mapper) is container.get(Mapper)


def test_repositories_are_bound_to_given_session(container):
    session: Session = container.get("session_factory")()
    try:
        repository = container.get(FranchiseRepository, session=session)
        service = container.get(FranchiseService, session=session)
    finally:
        session.close()

    assert isinstance(repository, SqlFranchiseRepository)
    assert isinstance(service, FranchiseService)
    assert container.get(FranchiseRepository, session=session) is not repository
