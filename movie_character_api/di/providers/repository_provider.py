from typing import TYPE_CHECKING

from ...domain.repositories.character_repository import CharacterRepository
from ...domain.repositories.franchise_repository import FranchiseRepository
from ...domain.repositories.movie_repository import MovieRepository
from ...infrastructure.db.sql_character_repository import SqlCharacterRepository
from ...infrastructure.db.sql_franchise_repository import SqlFranchiseRepository
from ...infrastructure.db.sql_movie_repository import SqlMovieRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository factories.
        Repositories are request-scoped: each one wraps the session it is given.
        """
        # Domain interfaces -> Infrastructure implementations
        container.register_factory(FranchiseRepository, lambda session: SqlFranchiseRepository(session))
        container.register_factory(MovieRepository, lambda session: SqlMovieRepository(session))
        container.register_factory(CharacterRepository, lambda session: SqlCharacterRepository(session))
